"""Unix look-alike easter eggs: uptime, date, echo, ls, pwd, cat."""

from __future__ import annotations

import datetime
import random
import time
from collections.abc import Callable

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.models.corpus import Corpus
from pwv_terminal.models.terminal import CommandCategory, CommandResult

LS_OUTPUT = """
total 42

drwxr-xr-x  10 pwv  staff   320 Feb  7 2026 portfolio/
drwxr-xr-x   8 pwv  staff   256 Feb  7 2026 team/
drwxr-xr-x  15 pwv  staff   480 Feb  7 2026 news/
drwxr-xr-x   4 pwv  staff   128 Feb  7 2026 ventures/
-rw-r--r--   1 pwv  staff  4096 Feb  7 2026 README.md
-rw-r--r--   1 pwv  staff  2048 Feb  7 2026 pwv.toml
-rwxr-xr-x   1 pwv  staff  8192 Feb  7 2026 invest.sh*

Type 'help' to see what you can actually do here.
"""

PWD_PATHS = (
    "/home/pwv/ventures",
    "/home/pwv/portfolio",
    "/usr/local/pwv/invest",
    "/opt/pwv/founders",
    "/var/pwv/startups",
)

README = """# PWV Terminal

Welcome to the PWV Terminal Interface!

## About PWV
PWV (Preston-Werner Ventures) is an early-stage venture capital
firm backing category-defining companies from zero to breakout.

## Getting Started
- Type 'help' to see available commands
- Type 'companies' to explore portfolio companies
- Type 'stats' to see corpus statistics
- Type 'surprise me' for something random

## Contact
- Newsletter: Type 'newsletter'
- Team: Type 'socials tom', 'socials dp', or 'socials dt'

Happy exploring!
"""

PWV_TOML = """[venture]
name = "PWV"
description = "PWV (Preston-Werner Ventures) is an early-stage venture capital firm backing category-defining companies from zero to breakout."
founded = 2023
location = "San Francisco, CA and Boston, MA"

[partners]
tom = "Tom Preston-Werner"
dp = "David Price"
dt = "David Thyresson"

[focus]
stage = ["pre-seed", "seed"]
sectors = ["AI", "developer tools", "infrastructure"]

[philosophy]
ideas = "Ideas start with founders."
founders = "Founders start with PWV."
pwv = "PWV is the fund we wanted as early-stage founders."
motto = "PWV is the fund we wanted as early-stage founders."
"""

FILES = {
    "readme": README,
    "readme.md": README,
    "pwv.toml": PWV_TOML,
}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''}"


def format_uptime(elapsed_seconds: float) -> str:
    """``"1 day, 3 hrs"`` style duration using the two largest units."""
    seconds = int(elapsed_seconds)
    minutes, hours, days = seconds // 60, seconds // 3600, seconds // 86400
    if days > 0:
        return f"{_plural(days, 'day')}, {_plural(hours % 24, 'hr')}"
    if hours > 0:
        return f"{_plural(hours, 'hr')}, {_plural(minutes % 60, 'min')}"
    if minutes > 0:
        return f"{_plural(minutes, 'min')}, {_plural(seconds % 60, 'sec')}"
    return _plural(seconds, "second")


class UptimeCommand(BaseCommand):
    """Time since this command was constructed, i.e. since the session began."""

    def __init__(
        self,
        corpus: Corpus,
        box_width: int = 64,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(corpus, box_width, rng)
        self._clock = clock
        self._started = clock()

    @property
    def name(self) -> str:
        return "uptime"

    @property
    def aliases(self) -> list[str]:
        return ["uptime"]

    @property
    def description(self) -> str:
        return "Show system uptime"

    @property
    def usage(self) -> str:
        return "uptime"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        uptime = format_uptime(self._clock() - self._started)
        return CommandResult.text(
            f"Terminal uptime: {uptime}\n\n"
            "PWV Stats:\n"
            f"  - {len(self._corpus.entities.companies)} companies in database\n"
            f"  - {len(self._corpus.posts)} posts analyzed\n"
            "  - Serving innovation since 2012\n\n"
            "Type 'stats' for more detailed statistics.\n"
        )


class DateCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "date"

    @property
    def aliases(self) -> list[str]:
        return ["date"]

    @property
    def description(self) -> str:
        return "Display current date and time"

    @property
    def usage(self) -> str:
        return "date"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        now = datetime.datetime.now().astimezone()
        return CommandResult.text(
            f"{now.strftime('%a %b %d %Y %H:%M:%S GMT%z (%Z)')}\n\n"
            "Perfect time to explore PWV portfolio companies. Type 'companies' to see them."
        )


class EchoCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "echo"

    @property
    def aliases(self) -> list[str]:
        return ["echo"]

    @property
    def description(self) -> str:
        return "Display a line of text"

    @property
    def usage(self) -> str:
        return "echo <text>"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult.text("")

        echoed = " ".join(args)
        lowered = echoed.lower()
        if "hello" in lowered or "hi" in lowered:
            return CommandResult.text(f"{echoed}\n\nHello! Type 'hello' for a proper greeting.")
        if "pwv" in lowered:
            return CommandResult.text(f"{echoed}\n\n💚 We invest to help make the future possible.")
        return CommandResult.text(echoed)


class LsCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "ls"

    @property
    def aliases(self) -> list[str]:
        return ["ls", "ll", "dir"]

    @property
    def description(self) -> str:
        return "List directory contents"

    @property
    def usage(self) -> str:
        return "ls"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(LS_OUTPUT)


class PwdCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "pwd"

    @property
    def aliases(self) -> list[str]:
        return ["pwd"]

    @property
    def description(self) -> str:
        return "Print working directory"

    @property
    def usage(self) -> str:
        return "pwd"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return CommandResult.text(
            f"{self._rng.choice(PWD_PATHS)}\n\n"
            "(Just kidding, you're in a web terminal. Type 'help' for real commands.)"
        )


class CatCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "cat"

    @property
    def aliases(self) -> list[str]:
        return ["cat"]

    @property
    def description(self) -> str:
        return "Concatenate and display files"

    @property
    def usage(self) -> str:
        return "cat <file>"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult.text("Usage: cat <file>\n\nTry: cat README.md")

        contents = FILES.get(args[0].lower())
        if contents is None:
            return CommandResult.text(
                f"cat: {args[0]}: No such file or directory\n\n"
                "Try: cat README.md or cat pwv.toml"
            )
        return CommandResult.text(contents)
