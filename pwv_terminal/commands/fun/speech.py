"""``cowsay`` and ``pwvsay``: text, a fortune or a bork in a speech bubble.

Both verbs claim piped aliases (``fortune | cowsay``, ``bork | pwvsay``)
that start with the bare ``fortune`` / ``bork`` verbs, so they must be
registered before the fortune and bork commands.
"""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.quotes import PWV_SPEAKERS, random_bork, random_fortune
from pwv_terminal.commands.helpers.text import speech_bubble
from pwv_terminal.models.terminal import CommandCategory, CommandResult

COW = (
    "        \\   ^__^\n"
    "         \\  (oo)\\_______\n"
    "            (__)\\       )\\/\\\n"
    "                ||----w |\n"
    "                ||     ||\n"
)

PWV_LOGO = (
    "        \\    ┌────┐\n"
    "         \\   │▄██▄│\n"
    "             │    │  PWV\n"
    "             └────┘\n"
)

# Speaker filters for the partner-specific pwvsay verbs.
SPEAKER_FILTERS = {
    "tomsay": ("Tom Preston-Werner", "Tom"),
    "dtsay": ("David Thyresson", "David T."),
    "dpsay": ("David Price", "David P."),
}


def render_speech(content: str, art: str, showcase_url: str | None = None) -> str:
    rendered = speech_bubble(content) + art
    if showcase_url:
        rendered += f"\n💬 View & share: {showcase_url}\n"
    return rendered


class CowsayCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "cowsay"

    @property
    def aliases(self) -> list[str]:
        return ["cowsay", "fortune | cowsay", "bork | cowsay"]

    @property
    def description(self) -> str:
        return "Any random quote with ASCII cow"

    @property
    def usage(self) -> str:
        return "cowsay <text>"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        command = raw_input.strip().lower()
        content = " ".join(args).strip()
        showcase_url = None

        if command == "fortune | cowsay" or (not content and command == "cowsay"):
            fortune = random_fortune(self._corpus, self._rng)
            content, showcase_url = fortune.text, fortune.showcase_url
        elif command == "bork | cowsay":
            content = random_bork(self._rng)
        elif not content:
            content = "Type something after cowsay!"

        return CommandResult.text(render_speech(content, COW, showcase_url))


class PwvsayCommand(BaseCommand):
    """The PWV logo says something, by default a quote from the team.

    ``tomsay``, ``dtsay`` and ``dpsay`` narrow the fortune to one partner's
    quotes.  Any explicit text is said verbatim.
    """

    @property
    def name(self) -> str:
        return "pwvsay"

    @property
    def aliases(self) -> list[str]:
        return ["pwvsay", "tomsay", "dtsay", "dpsay", "fortune | pwvsay", "bork | pwvsay"]

    @property
    def description(self) -> str:
        return "PWV team quote with PWV logo"

    @property
    def usage(self) -> str:
        return "pwvsay <text>"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        command = raw_input.strip().lower()
        content = " ".join(args).strip()
        showcase_url = None

        verb = command.split(" ", 1)[0]
        speakers = SPEAKER_FILTERS.get(verb, PWV_SPEAKERS)

        if command == "bork | pwvsay":
            content = random_bork(self._rng)
        elif not content or " | " in command:
            fortune = random_fortune(self._corpus, self._rng, speakers)
            content, showcase_url = fortune.text, fortune.showcase_url

        return CommandResult.text(
            render_speech(content or "Type something after pwvsay!", PWV_LOGO, showcase_url)
        )
