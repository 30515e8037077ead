"""Site call-to-action panels and session helpers: apply, newsletter, history, clear."""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.box_builder import build_box, divider, empty, header, text
from pwv_terminal.models.terminal import CommandCategory, CommandResult, ResultType

CLEAR_SENTINEL = "// Clear command - handled by component"


def call_to_action(title: str, intro: str, bullets: list[str], url: str, action: str) -> str:
    return build_box([
        header(title),
        text(intro),
        empty(),
        *[text(f"  • {bullet}") for bullet in bullets],
        divider(),
        text(f"Visit: {url}"),
        empty(),
        text(f"Click the link above to {action}."),
    ])


class ApplyCommand(BaseCommand):
    URL = "/apply/"

    @property
    def name(self) -> str:
        return "apply"

    @property
    def aliases(self) -> list[str]:
        return ["apply"]

    @property
    def description(self) -> str:
        return "Apply for PWV funding"

    @property
    def usage(self) -> str:
        return "apply"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        output = call_to_action(
            "APPLY FOR FUNDING",
            "PWV provides early-stage capital for technology founders",
            [
                "Investment: $500K–$3M+ (Pre-Seed through Series A)",
                "Focus: Platforms, tools, and infrastructure",
                "Partner from seed to scale",
                "Built by founders, run by operators",
            ],
            self.URL,
            "apply",
        )
        return CommandResult.text(output, url=self.URL)


class NewsletterCommand(BaseCommand):
    URL = "/newsletter/"

    @property
    def name(self) -> str:
        return "newsletter"

    @property
    def aliases(self) -> list[str]:
        return ["newsletter", "signup", "subscribe"]

    @property
    def description(self) -> str:
        return "Subscribe to PWV newsletter"

    @property
    def usage(self) -> str:
        return "newsletter"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        output = call_to_action(
            "PWV NEWSLETTER",
            "Subscribe to receive:",
            [
                "Latest news & announcements",
                "Founder insights & perspectives",
                "Portfolio company updates",
                "Community highlights",
            ],
            self.URL,
            "subscribe",
        )
        return CommandResult(type=ResultType.NEWSLETTER, content=output, data={"url": self.URL})


class HistoryCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "history"

    @property
    def aliases(self) -> list[str]:
        return ["history"]

    @property
    def description(self) -> str:
        return "View command history"

    @property
    def usage(self) -> str:
        return "history"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text("Command history is shown in your terminal session above.")


class ClearCommand(BaseCommand):
    """Placeholder result; the interactive shell clears the screen itself."""

    @property
    def name(self) -> str:
        return "clear"

    @property
    def aliases(self) -> list[str]:
        return ["clear", "cls"]

    @property
    def description(self) -> str:
        return "Clear the terminal"

    @property
    def usage(self) -> str:
        return "clear"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(CLEAR_SENTINEL)
