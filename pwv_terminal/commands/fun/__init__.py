"""Easter-egg commands."""

from pwv_terminal.commands.fun.greetings import BorkCommand, FigletCommand, HelloCommand
from pwv_terminal.commands.fun.shell import (
    CatCommand,
    DateCommand,
    EchoCommand,
    LsCommand,
    PwdCommand,
    UptimeCommand,
)
from pwv_terminal.commands.fun.speech import CowsayCommand, PwvsayCommand

__all__ = [
    "BorkCommand",
    "CatCommand",
    "CowsayCommand",
    "DateCommand",
    "EchoCommand",
    "FigletCommand",
    "HelloCommand",
    "LsCommand",
    "PwdCommand",
    "PwvsayCommand",
    "UptimeCommand",
]
