"""Offline corpus builder: Markdown posts in, aggregated entities JSON out.

Walks the posts directory, runs :class:`EntityExtractor` on each post and
writes one JSON record per post into ``records_dir`` as soon as it is
extracted, so an interrupted run resumes where it stopped.  Once every
post has a record, :meth:`CorpusBuilder.aggregate` folds the records into
the single corpus document the terminal loads.
"""

from __future__ import annotations

import asyncio
import datetime
import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pwv_terminal.models.corpus import Corpus, EntityKind, Post
from pwv_terminal.services.entity_extractor import EntityExtractor
from pwv_terminal.utils.errors import CorpusLoadError, EntityExtractionError, LLMError
from pwv_terminal.utils.logging import get_logger

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n?(.*)$", re.DOTALL)

POST_SUFFIXES = (".md", ".mdx")


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split a Markdown document into ``(frontmatter, body)``.

    Missing or invalid YAML yields empty metadata and the whole document
    as the body.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content
    try:
        metadata = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return {}, content
    if not isinstance(metadata, dict):
        return {}, match.group(2)
    return metadata, match.group(2)


def title_for(slug: str, frontmatter: dict[str, Any]) -> str:
    title = str(frontmatter.get("title") or "").replace('"', "").replace("'", "").strip()
    return title or slug.replace("-", " ")


class CorpusBuilder:
    """Resumable extraction run over a directory of posts.

    Parameters
    ----------
    extractor:
        Extracts one :class:`Post` per document.
    posts_dir:
        Directory holding ``*.md`` / ``*.mdx`` posts.
    records_dir:
        Where per-post JSON records are written.
    output_path:
        Destination of the aggregated corpus document.
    delay:
        Seconds to sleep between LLM calls.
    """

    def __init__(
        self,
        extractor: EntityExtractor,
        posts_dir: str | Path,
        records_dir: str | Path,
        output_path: str | Path,
        delay: float = 1.0,
    ) -> None:
        self._extractor = extractor
        self._posts_dir = Path(posts_dir)
        self._records_dir = Path(records_dir)
        self._output_path = Path(output_path)
        self._delay = delay
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def post_files(self, limit: int | None = None) -> list[Path]:
        if not self._posts_dir.is_dir():
            raise CorpusLoadError(
                message=f"Posts directory not found: {self._posts_dir}",
                provider_name="builder",
            )
        files = sorted(
            path for path in self._posts_dir.iterdir() if path.suffix in POST_SUFFIXES
        )
        return files[:limit] if limit else files

    def record_path(self, slug: str) -> Path:
        return self._records_dir / f"{slug}.json"

    async def run(self, limit: int | None = None, force: bool = False) -> Corpus:
        """Extract every pending post, then write and return the aggregate."""
        files = self.post_files(limit)
        self._records_dir.mkdir(parents=True, exist_ok=True)
        self._logger.info("corpus_build_start", posts=len(files), force=force)

        extracted = skipped = failed = 0
        for path in files:
            slug = path.stem
            if self.record_path(slug).exists() and not force:
                skipped += 1
                continue

            frontmatter, body = parse_frontmatter(path.read_text(encoding="utf-8"))
            if extracted or failed:
                await asyncio.sleep(self._delay)
            try:
                post = await self._extractor.extract(slug, title_for(slug, frontmatter), body, frontmatter)
            except (EntityExtractionError, LLMError) as exc:
                # No record is written, so the next run retries this post.
                self._logger.error("entity_extraction_failed", slug=slug, error=str(exc))
                failed += 1
                continue

            self.write_record(post)
            extracted += 1

        posts = self.load_records(path.stem for path in files)
        corpus = self.aggregate(posts)
        invalid = self.validate_references(corpus)
        self.write_corpus(corpus)
        self._logger.info(
            "corpus_build_complete",
            extracted=extracted,
            skipped=skipped,
            failed=failed,
            invalid_references=invalid,
            output=str(self._output_path),
        )
        return corpus

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def write_record(self, post: Post) -> None:
        record = post.model_dump(by_alias=True, exclude_none=True, mode="json")
        with open(self.record_path(post.slug), "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False)

    def load_records(self, slugs: Iterable[str]) -> list[Post]:
        """Posts for every slug that has a record, in the given order."""
        posts = []
        for slug in slugs:
            path = self.record_path(slug)
            if not path.exists():
                continue
            try:
                with open(path, encoding="utf-8") as f:
                    posts.append(Post.model_validate({**json.load(f), "slug": slug}))
            except (OSError, json.JSONDecodeError, ValidationError) as exc:
                self._logger.warning("record_unreadable", slug=slug, error=str(exc))
        return posts

    def write_corpus(self, corpus: Corpus) -> None:
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._output_path, "w", encoding="utf-8") as f:
            json.dump(corpus.to_document(), f, indent=2, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    @staticmethod
    def aggregate(posts: list[Post], now: datetime.datetime | None = None) -> Corpus:
        """Fold per-post records into the corpus document.

        Each entity lists its posts in encounter order and counts one
        mention per occurrence.  A person keeps the first non-empty role
        seen.  Quotes are flattened in post order.
        """
        entities: dict[str, dict[str, dict[str, Any]]] = {
            kind.collection: {} for kind in EntityKind
        }

        def mention(collection: str, name: str, slug: str) -> dict[str, Any]:
            entry = entities[collection].setdefault(name, {"posts": [], "mentions": 0})
            entry["posts"].append(slug)
            entry["mentions"] += 1
            return entry

        quotes = []
        for post in posts:
            for company in post.companies:
                mention("companies", company, post.slug)
            for investor in post.investors:
                mention("investors", investor, post.slug)
            for person in post.people:
                entry = mention("people", person.name, post.slug)
                if person.role and not entry.get("role"):
                    entry["role"] = person.role
            for topic in post.topics:
                mention("topics", topic, post.slug)
            for quote in post.quotes:
                quotes.append({
                    "quote": quote.quote,
                    "speaker": quote.speaker,
                    "context": quote.context,
                    "postSlug": post.slug,
                    "postTitle": post.display_title,
                    "pubDate": post.pub_date,
                })

        dates = sorted(post.pub_date for post in posts if post.pub_date)
        metadata: dict[str, Any] = {
            "extractedAt": (now or datetime.datetime.now(datetime.timezone.utc)).isoformat(),
            "totalPosts": len(posts),
        }
        if dates:
            metadata["dateRange"] = {"oldest": dates[0], "newest": dates[-1]}

        return Corpus.model_validate({
            "posts": {post.slug: post.model_dump(by_alias=True) for post in posts},
            "entities": {**entities, "quotes": quotes},
            "metadata": metadata,
        })

    def validate_references(self, corpus: Corpus) -> int:
        """Log and count entity references to posts missing from the corpus."""
        invalid = 0
        for kind in EntityKind:
            for name, aggregate in corpus.entity_map(kind).items():
                for slug in aggregate.posts:
                    if slug not in corpus.posts:
                        self._logger.warning(
                            "invalid_post_reference",
                            kind=kind.value,
                            entity=name,
                            slug=slug,
                        )
                        invalid += 1
        return invalid
