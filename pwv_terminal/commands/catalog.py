"""Registration order of every Command Object.

``ALL_COMMANDS`` is the single place where registration order is defined.
Commands whose aliases extend another command's verb (``fortune | cowsay``,
``bork | pwvsay``) must appear before that command; the registry refuses
to build when this is violated.
"""

from __future__ import annotations

import random

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.fun import (
    BorkCommand,
    CatCommand,
    CowsayCommand,
    DateCommand,
    EchoCommand,
    FigletCommand,
    HelloCommand,
    LsCommand,
    PwdCommand,
    PwvsayCommand,
    UptimeCommand,
)
from pwv_terminal.commands.lists import (
    CompaniesCommand,
    FactsCommand,
    FiguresCommand,
    InvestorsCommand,
    PeopleCommand,
    PortfolioCommand,
    QuotesCommand,
    TopicsCommand,
)
from pwv_terminal.commands.registry import CommandRegistry
from pwv_terminal.commands.utility import (
    ApplyCommand,
    BlueskyCommand,
    ClearCommand,
    FortuneCommand,
    GithubCommand,
    HistoryCommand,
    LinkedinCommand,
    NewsletterCommand,
    SocialsCommand,
    StatsCommand,
    SurpriseCommand,
    TwitterCommand,
    WhoamiCommand,
    WwwCommand,
)
from pwv_terminal.models.corpus import Corpus

ALL_COMMANDS: tuple[type[BaseCommand], ...] = (
    # List commands
    CompaniesCommand,
    InvestorsCommand,
    PeopleCommand,
    TopicsCommand,
    QuotesCommand,
    FactsCommand,
    FiguresCommand,
    PortfolioCommand,
    # Exploration
    StatsCommand,
    SurpriseCommand,
    # Piped speech commands before bork and fortune
    CowsayCommand,
    PwvsayCommand,
    HelloCommand,
    BorkCommand,
    FigletCommand,
    UptimeCommand,
    DateCommand,
    EchoCommand,
    LsCommand,
    PwdCommand,
    CatCommand,
    FortuneCommand,
    WhoamiCommand,
    # Team links and site panels
    SocialsCommand,
    GithubCommand,
    TwitterCommand,
    LinkedinCommand,
    BlueskyCommand,
    WwwCommand,
    ApplyCommand,
    NewsletterCommand,
    HistoryCommand,
    ClearCommand,
)


def build_commands(
    corpus: Corpus,
    box_width: int = 64,
    rng: random.Random | None = None,
) -> list[BaseCommand]:
    """Instantiate every command in registration order over *corpus*."""
    return [command_class(corpus, box_width, rng) for command_class in ALL_COMMANDS]


def build_registry(
    corpus: Corpus,
    box_width: int = 64,
    rng: random.Random | None = None,
) -> CommandRegistry:
    return CommandRegistry(build_commands(corpus, box_width, rng))
