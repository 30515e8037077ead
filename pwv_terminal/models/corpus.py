"""Entity corpus models for the discovery terminal.

Defines the immutable Pydantic v2 models that mirror the aggregated
entities JSON document produced offline by ``pwv-extract``: posts with
their extracted facts/figures/quotes, the denormalized entity aggregates
(companies, investors, people, topics), the flat quote sequence and the
extraction metadata.

JSON keys are camelCase (``pubDate``, ``postSlug``) while Python fields
are snake_case.  Every model accepts both spellings on input
(``populate_by_name``) and writers serialise with ``by_alias=True`` so the
files on disk keep the camelCase contract.

Key relationships:
    - Corpus.posts maps slug -> Post
    - Corpus.entities.<kind> maps canonical name -> EntityAggregate, whose
      ``posts`` list holds slugs into Corpus.posts
    - Corpus.entities.quotes is a flat ordered list; the position of a
      quote is part of its display identifier (see Corpus.quote_id)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pwv_terminal.models.portfolio import PortfolioListing, TeamMember


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FactCategory(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Allowed categories for an extracted fact.

    Anything else coming out of the extraction step is coerced to
    ``INSIGHT`` when the model is validated.
    """

    INSIGHT = "insight"
    TREND = "trend"
    PHILOSOPHY = "philosophy"
    ANNOUNCEMENT = "announcement"
    MILESTONE = "milestone"
    FUNDING = "funding"
    LAUNCH = "launch"
    PARTNERSHIP = "partnership"


_FACT_CATEGORIES = frozenset(category.value for category in FactCategory)


class EntityKind(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """The four aggregate families, valued by their singular noun."""

    COMPANY = "company"
    INVESTOR = "investor"
    PERSON = "person"
    TOPIC = "topic"

    @property
    def collection(self) -> str:
        """Attribute name of this kind's mapping on :class:`EntityIndex`."""
        return _COLLECTIONS[self]

    @property
    def list_verb(self) -> str:
        """The bare list command that shows every entity of this kind."""
        return _COLLECTIONS[self]


_COLLECTIONS = {
    EntityKind.COMPANY: "companies",
    EntityKind.INVESTOR: "investors",
    EntityKind.PERSON: "people",
    EntityKind.TOPIC: "topics",
}


# ---------------------------------------------------------------------------
# Post-level models
# ---------------------------------------------------------------------------

class Fact(BaseModel):
    """A single factual statement extracted from one post."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    category: FactCategory = FactCategory.INSIGHT
    date: str | None = None

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Any:
        if isinstance(value, FactCategory):
            return value
        if isinstance(value, str) and value.lower() in _FACT_CATEGORIES:
            return value.lower()
        return FactCategory.INSIGHT


class Figure(BaseModel):
    """A numeric figure (``$50M``, ``1000 users``) with its context."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    value: str
    context: str
    unit: str = ""

    @field_validator("value", "unit", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # LLM output sometimes carries bare numbers here.
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


class PersonMention(BaseModel):
    """A person named in a post, with the role the post gives them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    role: str | None = None


class PostQuote(BaseModel):
    """A quote as stored on its owning post (no back-reference)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quote: str
    speaker: str
    context: str | None = None


class Post(BaseModel):
    """One corpus document and everything extracted from it.

    ``people`` accepts either ``{"name": ..., "role": ...}`` objects or
    bare name strings; bare strings become a mention without a role.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str = ""
    title: str = ""
    pub_date: str | None = Field(default=None, alias="pubDate")
    author: str | None = None
    url: str | None = None
    tags: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    investors: list[str] = Field(default_factory=list)
    people: list[PersonMention] = Field(default_factory=list)
    facts: list[Fact] = Field(default_factory=list)
    figures: list[Figure] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
    quotes: list[PostQuote] = Field(default_factory=list)

    @field_validator("people", mode="before")
    @classmethod
    def _coerce_people(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def display_title(self) -> str:
        """Title when present, otherwise the slug."""
        return self.title or self.slug


# ---------------------------------------------------------------------------
# Aggregate models
# ---------------------------------------------------------------------------

class EntityAggregate(BaseModel):
    """Per-name summary of which posts mention an entity.

    ``mentions`` is produced offline and may drift from ``len(posts)``;
    displayed counts use :attr:`post_count` while rankings use ``mentions``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    posts: list[str] = Field(default_factory=list)
    mentions: int = 0
    role: str | None = None
    description: str | None = None

    @property
    def post_count(self) -> int:
        return len(self.posts)


class Quote(BaseModel):
    """A quote in the corpus-level flat sequence, carrying its source post."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quote: str
    speaker: str
    context: str | None = None
    post_slug: str = Field(alias="postSlug")
    post_title: str = Field(default="", alias="postTitle")
    pub_date: str | None = Field(default=None, alias="pubDate")


class EntityIndex(BaseModel):
    """The ``entities`` section of the corpus document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    companies: dict[str, EntityAggregate] = Field(default_factory=dict)
    investors: dict[str, EntityAggregate] = Field(default_factory=dict)
    people: dict[str, EntityAggregate] = Field(default_factory=dict)
    topics: dict[str, EntityAggregate] = Field(default_factory=dict)
    quotes: list[Quote] = Field(default_factory=list)


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    oldest: str
    newest: str


class ExtractionMetadata(BaseModel):
    """When and over how many posts the corpus was extracted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    extracted_at: str = Field(default="", alias="extractedAt")
    total_posts: int = Field(default=0, alias="totalPosts")
    date_range: DateRange | None = Field(default=None, alias="dateRange")
    note: str | None = None


# ---------------------------------------------------------------------------
# Corpus root
# ---------------------------------------------------------------------------

class Corpus(BaseModel):
    """The whole in-memory corpus, loaded once and never mutated.

    Name lookups are case-insensitive and always resolve to the canonical
    key as stored in the mapping; when two keys differ only by case the
    first in document order wins.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    posts: dict[str, Post] = Field(default_factory=dict)
    entities: EntityIndex = Field(default_factory=EntityIndex)
    portfolio: PortfolioListing | None = None
    team: list[TeamMember] = Field(default_factory=list)
    metadata: ExtractionMetadata = Field(default_factory=ExtractionMetadata)

    @model_validator(mode="before")
    @classmethod
    def _fill_post_slugs(cls, data: Any) -> Any:
        # Post records omit their slug; the mapping key is authoritative.
        if not isinstance(data, dict) or not isinstance(data.get("posts"), dict):
            return data
        posts = {}
        for slug, post in data["posts"].items():
            if isinstance(post, dict) and not post.get("slug"):
                post = {**post, "slug": slug}
            posts[slug] = post
        return {**data, "posts": posts}

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def entity_map(self, kind: EntityKind) -> dict[str, EntityAggregate]:
        """Return the name -> aggregate mapping for *kind*."""
        return getattr(self.entities, kind.collection)

    def find_entity(self, kind: EntityKind, name: str) -> str | None:
        """Return the canonical key matching *name* case-insensitively, or None."""
        wanted = name.strip().lower()
        if not wanted:
            return None
        for key in self.entity_map(kind):
            if key.lower() == wanted:
                return key
        return None

    def get_post(self, slug: str) -> Post | None:
        return self.posts.get(slug)

    def post_title(self, slug: str) -> str:
        """Title of the post at *slug*, falling back to the slug itself."""
        post = self.posts.get(slug)
        return post.display_title if post else slug

    @property
    def quotes(self) -> list[Quote]:
        return self.entities.quotes

    def quote_id(self, index: int) -> str:
        """Stable display identifier ``"<postSlug>-<index>"`` for a quote.

        *index* is the quote's position in the flat sequence, so the same
        quote always yields the same identifier for the life of the corpus.
        """
        return f"{self.entities.quotes[index].post_slug}-{index}"

    def to_document(self) -> dict[str, Any]:
        """Serialise back to the camelCase JSON contract."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Flattened views -- facts and figures carried with their owning post
# ---------------------------------------------------------------------------

class SourcedFact(BaseModel):
    """A fact lifted out of its post, keeping the post's slug and title."""

    model_config = ConfigDict(frozen=True)

    fact: Fact
    post_slug: str
    post_title: str
    pub_date: str | None = None


class SourcedFigure(BaseModel):
    """A figure lifted out of its post, keeping the post's slug and title."""

    model_config = ConfigDict(frozen=True)

    figure: Figure
    post_slug: str
    post_title: str
