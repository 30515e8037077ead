"""List commands: each publishes a numbered selectable list."""

from pwv_terminal.commands.lists.entities import (
    CompaniesCommand,
    EntityListCommand,
    InvestorsCommand,
    PeopleCommand,
    TopicsCommand,
)
from pwv_terminal.commands.lists.portfolio import PortfolioCommand
from pwv_terminal.commands.lists.posts import FactsCommand, FiguresCommand, QuotesCommand

__all__ = [
    "CompaniesCommand",
    "EntityListCommand",
    "FactsCommand",
    "FiguresCommand",
    "InvestorsCommand",
    "PeopleCommand",
    "PortfolioCommand",
    "QuotesCommand",
    "TopicsCommand",
]
