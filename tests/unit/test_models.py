"""Unit tests for the corpus, portfolio and terminal Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pwv_terminal.models.corpus import (
    Corpus,
    EntityKind,
    Fact,
    FactCategory,
    Figure,
    Post,
)
from pwv_terminal.models.portfolio import FundBucket, PortfolioCompany, PortfolioListing
from pwv_terminal.models.terminal import (
    CommandResult,
    HistoryEntry,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)


# ======================================================================
# Post-level models
# ======================================================================


class TestFact:
    def test_known_category_is_case_insensitive(self) -> None:
        fact = Fact(text="Raised $5M", category="Funding")
        assert fact.category == FactCategory.FUNDING

    def test_unknown_category_becomes_insight(self) -> None:
        fact = Fact(text="Something", category="gossip")
        assert fact.category == FactCategory.INSIGHT

    def test_missing_category_defaults_to_insight(self) -> None:
        assert Fact(text="x").category == FactCategory.INSIGHT


class TestFigure:
    def test_numeric_value_is_stringified(self) -> None:
        figure = Figure(value=1000, context="users", unit=None)
        assert figure.value == "1000"
        assert figure.unit == ""


class TestPost:
    def test_people_accept_bare_names(self) -> None:
        post = Post(slug="p", people=["Jane Doe", {"name": "Sam", "role": "CTO"}])
        assert post.people[0].name == "Jane Doe"
        assert post.people[0].role is None
        assert post.people[1].role == "CTO"

    def test_camel_case_alias(self) -> None:
        post = Post.model_validate({"slug": "p", "pubDate": "2024-05-01"})
        assert post.pub_date == "2024-05-01"

    def test_display_title_falls_back_to_slug(self) -> None:
        assert Post(slug="untitled-post").display_title == "untitled-post"

    def test_frozen(self) -> None:
        post = Post(slug="p")
        with pytest.raises(ValidationError):
            post.title = "changed"


# ======================================================================
# Corpus
# ======================================================================


class TestCorpus:
    def test_post_slugs_filled_from_keys(self, corpus: Corpus) -> None:
        assert corpus.posts["undated-note"].slug == "undated-note"

    def test_find_entity_ignores_case(self, corpus: Corpus) -> None:
        for name in ("acme", "ACME", "Acme", "  aCmE "):
            assert corpus.find_entity(EntityKind.COMPANY, name) == "Acme"

    def test_find_entity_missing(self, corpus: Corpus) -> None:
        assert corpus.find_entity(EntityKind.COMPANY, "Globex") is None
        assert corpus.find_entity(EntityKind.COMPANY, "") is None

    def test_quote_id_is_stable(self, corpus: Corpus) -> None:
        first = corpus.quote_id(1)
        assert first == "year-review-1"
        assert corpus.quote_id(1) == first

    def test_post_title_fallback(self, corpus: Corpus) -> None:
        assert corpus.post_title("acme-seed") == "Acme Raises $10M Seed"
        assert corpus.post_title("missing") == "missing"

    def test_to_document_uses_camel_case(self, corpus: Corpus) -> None:
        document = corpus.to_document()
        assert document["posts"]["acme-seed"]["pubDate"] == "2024-01-01"
        assert document["entities"]["quotes"][0]["postSlug"] == "acme-seed"
        assert document["metadata"]["totalPosts"] == 3
        assert "pubDate" not in document["posts"]["undated-note"]

    def test_empty_corpus(self, empty_corpus: Corpus) -> None:
        assert empty_corpus.quotes == []
        assert empty_corpus.portfolio is None
        assert empty_corpus.entity_map(EntityKind.TOPIC) == {}

    def test_entity_aggregate_post_count(self, corpus: Corpus) -> None:
        assert corpus.entities.companies["Acme"].post_count == 3


# ======================================================================
# Portfolio
# ======================================================================


class TestPortfolioListing:
    def _listing(self) -> PortfolioListing:
        return PortfolioListing.model_validate({
            "representative": [{"name": "zeta"}],
            "fundOne": [{"name": "Alpha"}],
            "rollingFund": [{"name": "beta", "acquiredBy": "Gamma"}],
            "angel": [],
        })

    def test_entries_sorted_ignoring_case(self) -> None:
        names = [entry.name for entry in self._listing().entries()]
        assert names == ["Alpha", "beta", "zeta"]

    def test_entries_carry_bucket(self) -> None:
        funds = {entry.name: entry.fund for entry in self._listing().entries()}
        assert funds["Alpha"] == FundBucket.FUND_ONE
        assert funds["beta"] == FundBucket.ROLLING_FUND

    def test_count(self) -> None:
        assert self._listing().count() == 3
        assert PortfolioListing().count() == 0

    def test_acquired_by_alias(self) -> None:
        company = PortfolioCompany.model_validate({"name": "x", "acquiredBy": "y"})
        assert company.acquired_by == "y"


# ======================================================================
# Terminal results
# ======================================================================


class TestCommandResult:
    def test_text_factory(self) -> None:
        result = CommandResult.text("hi", url="/apply/")
        assert result.type == ResultType.TEXT
        assert result.data == {"url": "/apply/"}
        assert result.selectable_items is None
        assert not result.is_error

    def test_error_factory(self) -> None:
        result = CommandResult.error("nope")
        assert result.is_error
        assert result.content == "nope"

    def test_selectable_items(self) -> None:
        item = SelectableItem(id="a", label="A", type=ItemType.COMPANY, kind=ItemKind.COMPANY)
        result = CommandResult(type=ResultType.LIST, content="", data={"selectable_items": [item]})
        assert result.selectable_items == [item]

    def test_history_entry_timestamp(self) -> None:
        entry = HistoryEntry(command="help", result=CommandResult.text("x"))
        assert entry.timestamp is not None
