"""Unit tests for the offline corpus builder."""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pwv_terminal.models.corpus import Corpus, Post
from pwv_terminal.services.corpus_builder import CorpusBuilder, parse_frontmatter, title_for
from pwv_terminal.services.entity_extractor import EntityExtractor
from pwv_terminal.utils.errors import CorpusLoadError, EntityExtractionError


# ======================================================================
# Helpers
# ======================================================================


def _fake_extract(slug: str, title: str, body: str, frontmatter: dict[str, Any] | None = None) -> Post:
    if slug == "broken":
        raise EntityExtractionError(message=f"unparseable {slug}", provider_name="mock-llm")
    return Post.model_validate({
        "slug": slug,
        "title": title,
        "pubDate": (frontmatter or {}).get("pubDate"),
        "companies": ["Acme"],
        "people": [{"name": "Jane Doe", "role": "CEO"}],
        "quotes": [{"quote": f"Said in {slug}", "speaker": "Jane Doe"}],
    })


def _make_extractor() -> MagicMock:
    extractor = MagicMock(spec=EntityExtractor)
    extractor.extract = AsyncMock(side_effect=_fake_extract)
    return extractor


def _write_posts(posts_dir: Path, **posts: str) -> None:
    posts_dir.mkdir(parents=True, exist_ok=True)
    for filename, content in posts.items():
        (posts_dir / filename).write_text(content, encoding="utf-8")


def _make_builder(tmp_path: Path, extractor: MagicMock, delay: float = 0.0) -> CorpusBuilder:
    return CorpusBuilder(
        extractor,
        posts_dir=tmp_path / "posts",
        records_dir=tmp_path / "records",
        output_path=tmp_path / "out" / "entities.json",
        delay=delay,
    )


POST_A = "---\ntitle: \"Alpha Post\"\npubDate: '2024-02-01'\n---\nBody of alpha."
POST_B = "---\ntitle: Beta\npubDate: '2023-06-15'\n---\nBody of beta."


# ======================================================================
# Front matter
# ======================================================================


class TestFrontmatter:
    def test_parses_yaml_block(self) -> None:
        metadata, body = parse_frontmatter("---\ntitle: Hi\ntags: [a, b]\n---\nBody text")
        assert metadata == {"title": "Hi", "tags": ["a", "b"]}
        assert body == "Body text"

    def test_without_block(self) -> None:
        assert parse_frontmatter("Just text") == ({}, "Just text")

    def test_invalid_yaml_keeps_whole_document(self) -> None:
        content = "---\ntitle: [unclosed\n---\nBody"
        assert parse_frontmatter(content) == ({}, content)

    def test_non_mapping_yaml(self) -> None:
        assert parse_frontmatter("---\n- a\n- b\n---\nBody") == ({}, "Body")

    def test_title_for(self) -> None:
        assert title_for("x", {"title": "\"Quoted\" Title"}) == "Quoted Title"
        assert title_for("hello-world", {}) == "hello world"


# ======================================================================
# run()
# ======================================================================


class TestRun:
    @pytest.mark.asyncio()
    async def test_extracts_and_writes_corpus(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A, "b.mdx": POST_B, "notes.txt": "ignored"})
        extractor = _make_extractor()

        corpus = await _make_builder(tmp_path, extractor).run()

        assert list(corpus.posts) == ["a", "b"]
        assert corpus.posts["a"].title == "Alpha Post"
        assert (tmp_path / "records" / "a.json").exists()
        assert (tmp_path / "records" / "b.json").exists()

        with open(tmp_path / "out" / "entities.json", encoding="utf-8") as f:
            document = json.load(f)
        assert document["entities"]["companies"]["Acme"] == {"posts": ["a", "b"], "mentions": 2}
        assert document["metadata"]["totalPosts"] == 2

    @pytest.mark.asyncio()
    async def test_existing_records_are_skipped(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A, "b.md": POST_B})
        extractor = _make_extractor()
        builder = _make_builder(tmp_path, extractor)

        await builder.run()
        corpus = await builder.run()

        assert extractor.extract.await_count == 2
        assert list(corpus.posts) == ["a", "b"]

    @pytest.mark.asyncio()
    async def test_force_re_extracts(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A})
        extractor = _make_extractor()
        builder = _make_builder(tmp_path, extractor)

        await builder.run()
        await builder.run(force=True)

        assert extractor.extract.await_count == 2

    @pytest.mark.asyncio()
    async def test_failed_post_writes_no_record(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A, "broken.md": "no front matter"})

        corpus = await _make_builder(tmp_path, _make_extractor()).run()

        assert not (tmp_path / "records" / "broken.json").exists()
        assert list(corpus.posts) == ["a"]

    @pytest.mark.asyncio()
    async def test_limit(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A, "b.md": POST_B})
        corpus = await _make_builder(tmp_path, _make_extractor()).run(limit=1)
        assert list(corpus.posts) == ["a"]

    @pytest.mark.asyncio()
    async def test_sleeps_between_calls(self, tmp_path: Path) -> None:
        _write_posts(tmp_path / "posts", **{"a.md": POST_A, "b.md": POST_B})
        builder = _make_builder(tmp_path, _make_extractor(), delay=2.5)

        with patch("pwv_terminal.services.corpus_builder.asyncio.sleep", new=AsyncMock()) as sleep:
            await builder.run()

        sleep.assert_awaited_once_with(2.5)

    @pytest.mark.asyncio()
    async def test_missing_posts_dir(self, tmp_path: Path) -> None:
        with pytest.raises(CorpusLoadError, match="Posts directory not found"):
            await _make_builder(tmp_path, _make_extractor()).run()

    def test_unreadable_record_is_skipped(self, tmp_path: Path) -> None:
        builder = _make_builder(tmp_path, _make_extractor())
        (tmp_path / "records").mkdir()
        (tmp_path / "records" / "bad.json").write_text("{oops", encoding="utf-8")
        assert builder.load_records(["bad", "missing"]) == []


# ======================================================================
# aggregate() / validate_references()
# ======================================================================


class TestAggregate:
    def test_folds_posts_into_entities(self) -> None:
        posts = [
            Post.model_validate({
                "slug": "one",
                "title": "One",
                "pubDate": "2024-03-01",
                "people": [{"name": "Jane Doe"}],
                "topics": ["ai"],
                "quotes": [{"quote": "First", "speaker": "Jane Doe"}],
            }),
            Post.model_validate({
                "slug": "two",
                "title": "Two",
                "pubDate": "2023-01-01",
                "people": [{"name": "Jane Doe", "role": "CEO"}, {"name": "Jane Doe", "role": "CTO"}],
                "topics": ["ai"],
                "quotes": [{"quote": "Second", "speaker": "Jane Doe", "context": "launch"}],
            }),
        ]
        now = datetime.datetime(2024, 4, 1, tzinfo=datetime.timezone.utc)

        corpus = CorpusBuilder.aggregate(posts, now=now)

        jane = corpus.entities.people["Jane Doe"]
        assert jane.role == "CEO"
        assert jane.posts == ["one", "two", "two"]
        assert jane.mentions == 3
        assert corpus.entities.topics["ai"].posts == ["one", "two"]
        assert [(q.post_slug, q.post_title, q.pub_date) for q in corpus.quotes] == [
            ("one", "One", "2024-03-01"),
            ("two", "Two", "2023-01-01"),
        ]
        assert corpus.metadata.extracted_at == "2024-04-01T00:00:00+00:00"
        assert corpus.metadata.date_range.oldest == "2023-01-01"
        assert corpus.metadata.date_range.newest == "2024-03-01"

    def test_no_dates_no_range(self) -> None:
        corpus = CorpusBuilder.aggregate([Post(slug="x", title="X")])
        assert corpus.metadata.date_range is None
        assert corpus.metadata.total_posts == 1

    def test_validate_references(self, tmp_path: Path) -> None:
        corpus = Corpus.model_validate({
            "posts": {"a": {"title": "A"}},
            "entities": {
                "companies": {"Acme": {"posts": ["a", "gone"], "mentions": 2}},
                "topics": {"ai": {"posts": ["missing"], "mentions": 1}},
            },
        })
        assert _make_builder(tmp_path, _make_extractor()).validate_references(corpus) == 2
