"""``hello``, ``bork`` and ``figlet``."""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.quotes import random_bork
from pwv_terminal.models.terminal import CommandCategory, CommandResult

GREETINGS = (
    "Hello, world!",
    "Hello, Dave.",
    "Hello there.",
    "hello?",
    "Hello, friend.",
    "Hi there! 👋",
    "Greetings!",
    "Hello, human.",
)

# Five-row block letters.  Anything not listed renders as a blank column.
FIGLET_LETTERS: dict[str, tuple[str, ...]] = {
    "A": ("    _    ", "   / \\   ", "  / _ \\  ", " / ___ \\ ", "/_/   \\_\\"),
    "B": (" ____  ", "| __ ) ", "|  _ \\ ", "| |_) |", "|____/ "),
    "C": ("  ____ ", " / ___|", "| |    ", "| |___ ", " \\____|"),
    "D": (" ____  ", "|  _ \\ ", "| | | |", "| |_| |", "|____/ "),
    "E": (" _____ ", "| ____|", "|  _|  ", "| |___ ", "|_____|"),
    "F": (" _____ ", "| ____|", "|  _|  ", "| |    ", "|_|    "),
    "G": ("  ____ ", " / ___|", "| |  _ ", "| |_| |", " \\____|"),
    "H": (" _   _ ", "| | | |", "| |_| |", "|  _  |", "|_| |_|"),
    "I": (" ___ ", "|_ _|", " | | ", " | | ", "|___|"),
    "J": ("     _ ", "    | |", " _  | |", "| |_| |", " \\___/ "),
    "K": (" _  __", "| |/ /", "| ' / ", "| . \\ ", "|_|\\_\\"),
    "L": (" _     ", "| |    ", "| |    ", "| |___ ", "|_____|"),
    "M": (" __  __ ", "|  \\/  |", "| |\\/| |", "| |  | |", "|_|  |_|"),
    "N": (" _   _ ", "| \\ | |", "|  \\| |", "| |\\  |", "|_| \\_|"),
    "O": ("  ___  ", " / _ \\ ", "| | | |", "| |_| |", " \\___/ "),
    "P": (" ____  ", "|  _ \\ ", "| |_) |", "|  __/ ", "|_|    "),
    "Q": ("  ___  ", " / _ \\ ", "| | | |", "| |_| |", " \\__\\_\\"),
    "R": (" ____  ", "|  _ \\ ", "| |_) |", "|  _ < ", "|_| \\_\\"),
    "S": ("  ____ ", " / ___|", " \\___ \\", "  ___) |", "|____/ "),
    "T": (" _____ ", "|_   _|", "  | |  ", "  | |  ", "  |_|  "),
    "U": (" _   _ ", "| | | |", "| | | |", "| |_| |", " \\___/ "),
    "V": ("__     __", "\\ \\   / /", " \\ \\ / / ", "  \\ V /  ", "   \\_/   "),
    "W": ("__        __", "\\ \\      / /", " \\ \\ /\\ / / ", "  \\ V  V /  ", "   \\_/\\_/   "),
    "X": ("__  __", "\\ \\/ /", " \\  / ", " /  \\ ", "/_/\\_\\"),
    "Y": ("__   __", "\\ \\ / /", " \\ V / ", "  | |  ", "  |_|  "),
    "Z": (" _____", "|__  /", "  / / ", " / /_ ", "/____|"),
    " ": ("   ", "   ", "   ", "   ", "   "),
}
FIGLET_ROWS = 5


def figlet(content: str) -> str:
    rows = [""] * FIGLET_ROWS
    for char in content.upper():
        glyph = FIGLET_LETTERS.get(char, FIGLET_LETTERS[" "])
        for row in range(FIGLET_ROWS):
            rows[row] += glyph[row] + " "
    return "\n" + "\n".join(rows) + "\n"


class HelloCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "hello"

    @property
    def aliases(self) -> list[str]:
        return ["hello"]

    @property
    def description(self) -> str:
        return "Random greeting"

    @property
    def usage(self) -> str:
        return "hello"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(f"\n{self._rng.choice(GREETINGS)}\n")


class BorkCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "bork"

    @property
    def aliases(self) -> list[str]:
        return ["bork", "bork bork", "bork bork bork"]

    @property
    def description(self) -> str:
        return "Bork bork bork!"

    @property
    def usage(self) -> str:
        return "bork"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(random_bork(self._rng) + "\n\n— 🧑‍🍳")


class FigletCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "figlet"

    @property
    def aliases(self) -> list[str]:
        return ["figlet"]

    @property
    def description(self) -> str:
        return "Generate ASCII art text"

    @property
    def usage(self) -> str:
        return "figlet <text>"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(figlet(" ".join(args).strip() or "PWV"))
