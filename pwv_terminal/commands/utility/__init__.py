"""Utility commands: quotes, exploration, team links and site panels."""

from pwv_terminal.commands.utility.exploration import StatsCommand, SurpriseCommand
from pwv_terminal.commands.utility.quotes import FortuneCommand, WhoamiCommand
from pwv_terminal.commands.utility.site import (
    ApplyCommand,
    ClearCommand,
    HistoryCommand,
    NewsletterCommand,
)
from pwv_terminal.commands.utility.team_links import (
    BlueskyCommand,
    GithubCommand,
    LinkedinCommand,
    SocialsCommand,
    TwitterCommand,
    WwwCommand,
)

__all__ = [
    "ApplyCommand",
    "BlueskyCommand",
    "ClearCommand",
    "FortuneCommand",
    "GithubCommand",
    "HistoryCommand",
    "LinkedinCommand",
    "NewsletterCommand",
    "SocialsCommand",
    "StatsCommand",
    "SurpriseCommand",
    "TwitterCommand",
    "WhoamiCommand",
    "WwwCommand",
]
