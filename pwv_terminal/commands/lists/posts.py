"""List commands over post-level extractions: quotes, facts and figures.

Quotes and facts are selectable; choosing one opens the post it came
from.  Figures are display-only.
"""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.box_builder import build_box, divider, header, list_section, text
from pwv_terminal.commands.helpers.text import number, truncate
from pwv_terminal.models.terminal import (
    CommandCategory,
    CommandResult,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)
from pwv_terminal.services import corpus_queries

VIEW_SOURCE_HINT = 'Type a number to view source post (e.g., "1")'


class QuotesCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "quotes"

    @property
    def aliases(self) -> list[str]:
        return ["quotes", "list quotes"]

    @property
    def description(self) -> str:
        return "Browse all quotes"

    @property
    def usage(self) -> str:
        return "quotes"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.LIST

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        ordered = corpus_queries.sorted_quotes(self._corpus)
        if not ordered:
            return CommandResult.text("No quotes found in the corpus.")

        lines = []
        for position, (_, quote) in enumerate(ordered):
            context = f" - {quote.context}" if quote.context else ""
            date = f" ({quote.pub_date})" if quote.pub_date else ""
            lines.append(
                f'{number(position, 3)}. "{truncate(quote.quote, 60)}"\n'
                f"       — {quote.speaker}{context}{date}"
            )

        output = build_box([
            header("ALL QUOTES"),
            text(f"Found {len(ordered)} quotes"),
            divider(),
            list_section(lines),
            divider(),
            text(VIEW_SOURCE_HINT),
        ])

        selectable_items = [
            SelectableItem(
                id=self._corpus.quote_id(index),
                label=f"{quote.speaker}: {quote.quote[:50]}...",
                type=ItemType.QUOTE,
                kind=ItemKind.QUOTE,
                data=quote,
            )
            for index, quote in ordered
        ]
        return CommandResult(
            type=ResultType.LIST,
            content=output,
            data={"selectable_items": selectable_items},
        )


class FactsCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "facts"

    @property
    def aliases(self) -> list[str]:
        return ["facts", "list facts"]

    @property
    def description(self) -> str:
        return "Browse all facts"

    @property
    def usage(self) -> str:
        return "facts"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.LIST

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        facts = corpus_queries.flatten_facts(self._corpus)
        if not facts:
            return CommandResult.text("No facts found in the corpus.")

        lines = []
        for position, sourced in enumerate(facts):
            fact = sourced.fact
            date = f" ({fact.date})" if fact.date else ""
            lines.append(
                f"{number(position, 3)}. {truncate(fact.text, 70)}\n"
                f"       [{fact.category.value}]{date} - {sourced.post_title[:40]}..."
            )

        output = build_box([
            header("ALL FACTS"),
            text(f"Found {len(facts)} facts"),
            divider(),
            list_section(lines),
            divider(),
            text(VIEW_SOURCE_HINT),
        ])

        selectable_items = [
            SelectableItem(
                id=f"fact-{position}",
                label=f"{sourced.fact.category.value}: {sourced.fact.text[:50]}...",
                type=ItemType.FACT,
                kind=ItemKind.FACT,
                data=sourced,
            )
            for position, sourced in enumerate(facts)
        ]
        return CommandResult(
            type=ResultType.LIST,
            content=output,
            data={"selectable_items": selectable_items},
        )


class FiguresCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "figures"

    @property
    def aliases(self) -> list[str]:
        return ["figures", "list figures"]

    @property
    def description(self) -> str:
        return "Browse all figures/metrics"

    @property
    def usage(self) -> str:
        return "figures"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.LIST

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        figures = corpus_queries.flatten_figures(self._corpus)
        if not figures:
            return CommandResult.text("No figures found in the corpus.")

        lines = [
            f"{number(position, 3)}. {sourced.figure.value}{sourced.figure.unit} - "
            f"{truncate(sourced.figure.context, 60)}\n"
            f"       From: {sourced.post_title[:50]}..."
            for position, sourced in enumerate(figures)
        ]
        output = build_box([
            header("ALL FIGURES"),
            text(f"Found {len(figures)} figures"),
            divider(),
            list_section(lines),
        ])
        # Display only: the current list is left as it was.
        return CommandResult(type=ResultType.LIST, content=output)
