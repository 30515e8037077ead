"""Unit tests for the list commands."""

from __future__ import annotations

from pwv_terminal.commands.lists import (
    CompaniesCommand,
    FactsCommand,
    FiguresCommand,
    PeopleCommand,
    PortfolioCommand,
    QuotesCommand,
    TopicsCommand,
)
from pwv_terminal.models.corpus import Corpus, SourcedFact
from pwv_terminal.models.portfolio import PortfolioEntry
from pwv_terminal.models.terminal import ItemKind, ItemType, ResultType


class TestEntityLists:
    def test_companies_sorted_and_numbered(self, corpus: Corpus) -> None:
        result = CompaniesCommand(corpus).execute("companies", [])

        assert result.type == ResultType.LIST
        assert ">> ALL COMPANIES" in result.content
        assert "   1. Acme (3 mentions)" in result.content
        assert "   2. Nimbus (1 mentions)" in result.content
        assert [item.id for item in result.selectable_items] == ["Acme", "Nimbus"]
        assert result.selectable_items[0].kind == ItemKind.COMPANY

    def test_list_prefix_alias(self, corpus: Corpus) -> None:
        command = CompaniesCommand(corpus)
        assert command.matches("list companies")
        assert not command.matches("list people")

    def test_people_show_roles(self, corpus: Corpus) -> None:
        content = PeopleCommand(corpus).execute("people", []).content
        assert " 1. Jane Doe - CEO" in content

    def test_topics_show_post_counts(self, corpus: Corpus) -> None:
        content = TopicsCommand(corpus).execute("topics", []).content
        assert " 1. developer tools (2 posts)" in content

    def test_empty_list(self, empty_corpus: Corpus) -> None:
        result = CompaniesCommand(empty_corpus).execute("companies", [])
        assert result.selectable_items == []


class TestQuotes:
    def test_newest_first_with_stable_ids(self, corpus: Corpus) -> None:
        result = QuotesCommand(corpus).execute("quotes", [])

        assert "Found 2 quotes" in result.content
        assert '  1. "Robots learn by watching."' in result.content
        assert "       — Jane Doe (2024-01-01)" in result.content
        assert [item.id for item in result.selectable_items] == ["acme-seed-0", "year-review-1"]
        assert result.selectable_items[0].type == ItemType.QUOTE

    def test_no_quotes_is_not_an_error(self, empty_corpus: Corpus) -> None:
        result = QuotesCommand(empty_corpus).execute("quotes", [])
        assert result.type == ResultType.TEXT
        assert result.content == "No quotes found in the corpus."


class TestFactsAndFigures:
    def test_facts_carry_source_post(self, corpus: Corpus) -> None:
        result = FactsCommand(corpus).execute("facts", [])

        assert "[funding] (2024-01-01)" in result.content
        items = result.selectable_items
        assert [item.id for item in items] == ["fact-0", "fact-1", "fact-2"]
        assert isinstance(items[0].data, SourcedFact)
        assert items[0].data.post_slug == "acme-seed"

    def test_no_facts(self, empty_corpus: Corpus) -> None:
        assert FactsCommand(empty_corpus).execute("facts", []).content == "No facts found in the corpus."

    def test_figures_are_display_only(self, corpus: Corpus) -> None:
        result = FiguresCommand(corpus).execute("figures", [])
        assert "  1. $10M - seed round" in result.content
        assert result.selectable_items is None


class TestPortfolio:
    def test_entries_with_news_marker(self, corpus: Corpus) -> None:
        result = PortfolioCommand(corpus).execute("portfolio", [])

        assert "Found 2 portfolio companies" in result.content
        assert "  1. Acme 📰 [Representative]" in result.content
        assert "  2. Zephyr [Fund I]" in result.content

        items = result.selectable_items
        assert [item.type for item in items] == [ItemType.COMPANY, ItemType.COMPANY]
        assert [item.kind for item in items] == [ItemKind.PORTFOLIO_COMPANY] * 2
        assert isinstance(items[0].data, PortfolioEntry)

    def test_without_listing(self, empty_corpus: Corpus) -> None:
        result = PortfolioCommand(empty_corpus).execute("portfolio", [])
        assert result.content == "No portfolio data available."
        assert result.selectable_items is None
