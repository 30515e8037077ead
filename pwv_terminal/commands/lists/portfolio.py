"""``portfolio`` -- the static portfolio listing, all buckets merged."""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.box_builder import build_box, divider, header, list_section, text
from pwv_terminal.commands.helpers.text import number
from pwv_terminal.models.corpus import EntityKind
from pwv_terminal.models.terminal import (
    CommandCategory,
    CommandResult,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)

NEWS_MARKER = " 📰"


class PortfolioCommand(BaseCommand):
    """List portfolio companies with their fund and a has-news marker.

    Items are tagged ``company`` publicly but carry the
    ``portfolio_company`` kind, so selecting one renders the portfolio
    profile rather than an entity profile.
    """

    @property
    def name(self) -> str:
        return "portfolio"

    @property
    def aliases(self) -> list[str]:
        return ["portfolio", "list portfolio"]

    @property
    def description(self) -> str:
        return "Browse PWV portfolio companies"

    @property
    def usage(self) -> str:
        return "portfolio"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.LIST

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        portfolio = self._corpus.portfolio
        if portfolio is None:
            return CommandResult.text("No portfolio data available.")

        entries = portfolio.entries()
        lines = []
        for position, entry in enumerate(entries):
            has_news = self._corpus.find_entity(EntityKind.COMPANY, entry.name) is not None
            marker = NEWS_MARKER if has_news else ""
            lines.append(
                f"{number(position, 3)}. {entry.name}{marker} [{entry.fund.value}]\n"
                f"       {', '.join(entry.company.tags)}"
            )

        output = build_box([
            header("PWV PORTFOLIO"),
            text(f"Found {len(entries)} portfolio companies"),
            text("📰 = Has news/posts"),
            divider(),
            list_section(lines),
            divider(),
            text('Type a number to view details (e.g., "1")'),
        ])

        selectable_items = [
            SelectableItem(
                id=entry.company.slug or entry.name,
                label=entry.name,
                type=ItemType.COMPANY,
                kind=ItemKind.PORTFOLIO_COMPANY,
                data=entry,
            )
            for entry in entries
        ]
        return CommandResult(
            type=ResultType.LIST,
            content=output,
            data={"selectable_items": selectable_items},
        )
