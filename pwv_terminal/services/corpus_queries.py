"""Read-only query algorithms over a loaded :class:`Corpus`.

Everything here is a pure function of the corpus and its arguments, so
the same lookups can be shared by the query engine's fallback verbs and by
Command Objects without either calling the other.

Failures are raised as :class:`~pwv_terminal.utils.errors.TerminalError`
subclasses; :meth:`QueryEngine.execute_command` turns them into error
results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pwv_terminal.models.corpus import (
    Corpus,
    EntityAggregate,
    EntityKind,
    Quote,
    SourcedFact,
    SourcedFigure,
)
from pwv_terminal.utils.errors import CommandUsageError, EntityNotFoundError

CONNECTIONS_USAGE = "Usage: connections <entity1> <entity2>"

# Connections are resolved against these kinds, in this order.
CONNECTION_KINDS = (EntityKind.COMPANY, EntityKind.PERSON, EntityKind.TOPIC)

UNKNOWN_DATE = "Unknown"

_AND_RE = re.compile(r"\s+and\s+", re.IGNORECASE)


@dataclass(frozen=True)
class TimelineEntry:
    date: str
    title: str
    slug: str


# ---------------------------------------------------------------------------
# Entity lookups
# ---------------------------------------------------------------------------

def resolve_entity(corpus: Corpus, kind: EntityKind, name: str) -> tuple[str, EntityAggregate]:
    """Return ``(canonical_name, aggregate)`` for *name*, ignoring case.

    Raises
    ------
    EntityNotFoundError
        With a message suggesting the list verb for *kind*.
    """
    canonical = corpus.find_entity(kind, name)
    if canonical is None:
        raise EntityNotFoundError(kind=kind.value, name=name)
    return canonical, corpus.entity_map(kind)[canonical]


def find_entity_posts(corpus: Corpus, name: str) -> list[str] | None:
    """Post slugs for *name* as a company, else a person, else a topic.

    A name present in several kinds always resolves to the first kind in
    :data:`CONNECTION_KINDS`.
    """
    for kind in CONNECTION_KINDS:
        canonical = corpus.find_entity(kind, name)
        if canonical is not None:
            return list(corpus.entity_map(kind)[canonical].posts)
    return None


def common_posts(first: list[str], second: list[str]) -> list[str]:
    """Slugs of *first* that also occur in *second*, in *first*'s order."""
    members = set(second)
    return [slug for slug in first if slug in members]


def parse_connection_args(args: str) -> tuple[str, str]:
    """Split ``"A and B"`` or ``"A B C"`` into two entity names.

    With a literal `` and `` the string is split once around it; otherwise
    the first whitespace token is the first entity and the remaining
    tokens, re-joined, the second.
    """
    args = args.strip()
    if _AND_RE.search(args):
        first, second = _AND_RE.split(args, maxsplit=1)
    else:
        tokens = args.split()
        first = tokens[0] if tokens else ""
        second = " ".join(tokens[1:])
    first, second = first.strip(), second.strip()
    if not first or not second:
        raise CommandUsageError(message=CONNECTIONS_USAGE)
    return first, second


def timeline_entries(corpus: Corpus, company: str) -> tuple[str, list[TimelineEntry]]:
    """Chronological posts for a company, sorted by the raw date string.

    Dates are ISO ``YYYY-MM-DD`` so plain string order is chronological;
    undated posts carry ``"Unknown"`` and land after every digit-led date.
    Only companies are searched.
    """
    canonical = corpus.find_entity(EntityKind.COMPANY, company)
    if canonical is None:
        raise EntityNotFoundError(
            kind=EntityKind.COMPANY.value,
            name=company,
            message=f'Entity "{company}" not found for timeline.',
        )

    entries = []
    for slug in corpus.entities.companies[canonical].posts:
        post = corpus.get_post(slug)
        entries.append(
            TimelineEntry(
                date=(post.pub_date if post else None) or UNKNOWN_DATE,
                title=post.display_title if post else slug,
                slug=slug,
            )
        )
    entries.sort(key=lambda entry: entry.date)
    return canonical, entries


# ---------------------------------------------------------------------------
# Flattened views
# ---------------------------------------------------------------------------

def _newest_first(items: list, date_of) -> list:
    # Dated entries newest first; undated entries after them, in input order.
    dated = [item for item in items if date_of(item)]
    undated = [item for item in items if not date_of(item)]
    return sorted(dated, key=date_of, reverse=True) + undated


def flatten_facts(corpus: Corpus) -> list[SourcedFact]:
    """Every fact of every post, newest fact date first."""
    facts = [
        SourcedFact(fact=fact, post_slug=slug, post_title=post.title, pub_date=post.pub_date)
        for slug, post in corpus.posts.items()
        for fact in post.facts
    ]
    return _newest_first(facts, lambda item: item.fact.date)


def flatten_figures(corpus: Corpus) -> list[SourcedFigure]:
    """Every figure of every post, in post order."""
    return [
        SourcedFigure(figure=figure, post_slug=slug, post_title=post.title)
        for slug, post in corpus.posts.items()
        for figure in post.figures
    ]


def sorted_quotes(corpus: Corpus) -> list[tuple[int, Quote]]:
    """Quotes newest first, each paired with its position in the corpus.

    The position is what :meth:`Corpus.quote_id` needs, so identifiers do
    not change with display order.
    """
    return _newest_first(list(enumerate(corpus.quotes)), lambda pair: pair[1].pub_date)


def top_entity(corpus: Corpus, kind: EntityKind) -> tuple[str, EntityAggregate] | None:
    """The entity of *kind* with the highest ``mentions``.

    Ties keep mapping order, so the first-listed name wins.
    """
    best: tuple[str, EntityAggregate] | None = None
    for name, aggregate in corpus.entity_map(kind).items():
        if best is None or aggregate.mentions > best[1].mentions:
            best = (name, aggregate)
    return best
