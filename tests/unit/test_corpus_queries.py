"""Unit tests for the read-only corpus query functions."""

from __future__ import annotations

import pytest

from pwv_terminal.models.corpus import Corpus, EntityKind
from pwv_terminal.services import corpus_queries
from pwv_terminal.utils.errors import CommandUsageError, EntityNotFoundError


class TestResolveEntity:
    @pytest.mark.parametrize("name", ["jane doe", "JANE DOE", "Jane Doe"])
    def test_case_insensitive(self, corpus: Corpus, name: str) -> None:
        canonical, aggregate = corpus_queries.resolve_entity(corpus, EntityKind.PERSON, name)
        assert canonical == "Jane Doe"
        assert aggregate.role == "CEO"

    def test_not_found(self, corpus: Corpus) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            corpus_queries.resolve_entity(corpus, EntityKind.TOPIC, "quantum")
        assert exc_info.value.kind == "topic"
        assert exc_info.value.name == "quantum"
        assert "Try 'topics' to see all topics." in exc_info.value.message


class TestFindEntityPosts:
    def test_company_wins_over_topic(self) -> None:
        corpus = Corpus.model_validate({
            "entities": {
                "companies": {"Rust": {"posts": ["a"], "mentions": 1}},
                "topics": {"rust": {"posts": ["b"], "mentions": 1}},
            },
        })
        assert corpus_queries.find_entity_posts(corpus, "RUST") == ["a"]

    def test_falls_through_to_topics(self, corpus: Corpus) -> None:
        assert corpus_queries.find_entity_posts(corpus, "robotics") == ["acme-seed", "year-review"]

    def test_investors_are_not_searched(self, corpus: Corpus) -> None:
        assert corpus_queries.find_entity_posts(corpus, "PWV") is None


class TestParseConnectionArgs:
    def test_and_separator(self) -> None:
        assert corpus_queries.parse_connection_args("Jane Doe and Tom Preston-Werner") == (
            "Jane Doe",
            "Tom Preston-Werner",
        )

    def test_first_token_then_rest(self) -> None:
        assert corpus_queries.parse_connection_args("Acme developer tools") == (
            "Acme",
            "developer tools",
        )

    @pytest.mark.parametrize("args", ["", "   ", "Acme"])
    def test_needs_two_names(self, args: str) -> None:
        with pytest.raises(CommandUsageError):
            corpus_queries.parse_connection_args(args)


class TestCommonPosts:
    def test_keeps_first_list_order(self) -> None:
        assert corpus_queries.common_posts(["c", "a", "b"], ["a", "c"]) == ["c", "a"]

    def test_empty_intersection(self) -> None:
        assert corpus_queries.common_posts(["a"], ["b"]) == []


class TestTimelineEntries:
    def test_lexical_order_with_unknown_last(self, corpus: Corpus) -> None:
        canonical, entries = corpus_queries.timeline_entries(corpus, "ACME")
        assert canonical == "Acme"
        assert [entry.date for entry in entries] == ["2023-12-31", "2024-01-01", "Unknown"]
        assert entries[-1].title == "Undated Note"

    def test_missing_post_uses_slug_as_title(self) -> None:
        corpus = Corpus.model_validate({
            "entities": {"companies": {"Ghost": {"posts": ["gone"], "mentions": 1}}},
        })
        _, entries = corpus_queries.timeline_entries(corpus, "ghost")
        assert (entries[0].date, entries[0].title) == ("Unknown", "gone")


class TestFlattenedViews:
    def test_facts_newest_first_then_undated(self, corpus: Corpus) -> None:
        facts = corpus_queries.flatten_facts(corpus)
        assert [fact.post_slug for fact in facts] == ["acme-seed", "year-review", "undated-note"]
        assert facts[0].post_title == "Acme Raises $10M Seed"

    def test_figures_in_post_order(self, corpus: Corpus) -> None:
        figures = corpus_queries.flatten_figures(corpus)
        assert len(figures) == 1
        assert figures[0].figure.value == "$10M"

    def test_sorted_quotes_keep_positions(self, corpus: Corpus) -> None:
        ordered = corpus_queries.sorted_quotes(corpus)
        assert [index for index, _ in ordered] == [0, 1]
        assert ordered[0][1].speaker == "Jane Doe"

    def test_top_entity_ties_keep_mapping_order(self, corpus: Corpus) -> None:
        name, aggregate = corpus_queries.top_entity(corpus, EntityKind.TOPIC)
        assert name == "robotics"
        assert aggregate.mentions == 2

    def test_top_entity_of_empty_kind(self, empty_corpus: Corpus) -> None:
        assert corpus_queries.top_entity(empty_corpus, EntityKind.COMPANY) is None
