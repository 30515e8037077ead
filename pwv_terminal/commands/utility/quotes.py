"""``fortune`` and ``whoami``: a random quote from the corpus."""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.quotes import PWV_SPEAKERS, random_fortune
from pwv_terminal.models.terminal import CommandCategory, CommandResult


class FortuneCommand(BaseCommand):
    """Any quote, chosen uniformly, with its share link.

    Registered after ``cowsay`` and ``pwvsay`` because its bare alias is a
    prefix of their piped forms.
    """

    @property
    def name(self) -> str:
        return "fortune"

    @property
    def aliases(self) -> list[str]:
        return ["fortune"]

    @property
    def description(self) -> str:
        return "Get any random quote from corpus"

    @property
    def usage(self) -> str:
        return "fortune"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        fortune = random_fortune(self._corpus, self._rng)
        if fortune.showcase_url is None:
            return CommandResult.text(fortune.text)
        return CommandResult.text(
            f"{fortune.text}\n\n💬 View & share: {fortune.showcase_url}",
            url=fortune.showcase_url,
        )


class WhoamiCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "whoami"

    @property
    def aliases(self) -> list[str]:
        return ["whoami"]

    @property
    def description(self) -> str:
        return "Random PWV philosophy quote"

    @property
    def usage(self) -> str:
        return "whoami"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        quotes = self._corpus.quotes
        if not quotes:
            return CommandResult.text(
                '\n  "We invest to help make the future possible."\n\n  — PWV\n'
            )
        wanted = [speaker.lower() for speaker in PWV_SPEAKERS]
        pool = [q for q in quotes if any(w in q.speaker.lower() for w in wanted)] or quotes
        quote = self._rng.choice(pool)
        return CommandResult.text(f'\n  "{quote.quote}"\n\n  — {quote.speaker}\n')
