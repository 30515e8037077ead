"""Rendering of profiles, posts, random cards and aggregate views.

:class:`ProfileRenderer` turns corpus lookups from
:mod:`pwv_terminal.services.corpus_queries` into
:class:`~pwv_terminal.models.terminal.CommandResult` values.  It is shared
by the query engine (numeric selection and the ``showcase`` / ``timeline``
/ ``connections`` verbs) and by the ``stats`` and ``surprise`` commands,
so those never have to call each other.

Profiles of companies, investors, people and topics publish the entity's
posts as the new selectable list; the engine installs it, which makes
``companies`` -> ``1`` -> ``1`` open the first post of the first company.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Services (pure rendering over the immutable Corpus).
# Callers: QueryEngine, the stats command and the surprise command.
# Lookups live in services/corpus_queries.py; layout primitives live in
# commands/helpers/box_builder.py.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import random
from collections.abc import Iterable

import structlog

from pwv_terminal.commands.helpers.box_builder import (
    build_box,
    divider,
    empty,
    framed_card,
    header,
    key_value,
    list_section,
    text,
)
from pwv_terminal.commands.helpers.text import number, truncate, wrap_text
from pwv_terminal.models.corpus import Corpus, EntityKind
from pwv_terminal.models.portfolio import FundBucket, PortfolioEntry
from pwv_terminal.models.terminal import (
    CommandResult,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)
from pwv_terminal.services import corpus_queries

logger = structlog.get_logger(logger_name=__name__)

# ─── Shared labels ───
OPEN_POST_HINT = 'Type a number to open that post (e.g., "1")'
STATS_RULE = "─" * 53

_PROFILE_HEADERS = {
    EntityKind.COMPANY: "COMPANY PROFILE",
    EntityKind.INVESTOR: "INVESTOR PROFILE",
    EntityKind.PERSON: "PERSON PROFILE",
    EntityKind.TOPIC: "TOPIC EXPLORER",
}

_RANDOM_CATEGORIES = ("company", "person", "fact", "figure", "quote")


def post_url(slug: str) -> str:
    return f"/news/{slug}/"


class ProfileRenderer:
    """Builds display results over one immutable corpus."""

    def __init__(
        self,
        corpus: Corpus,
        box_width: int = 64,
        rng: random.Random | None = None,
    ) -> None:
        self._corpus = corpus
        self._box_width = box_width
        self._rng = rng or random.Random()

    def set_box_width(self, width: int) -> None:
        self._box_width = width

    # ------------------------------------------------------------------
    # Selectable post lists
    # ------------------------------------------------------------------

    def post_items(self, slugs: Iterable[str]) -> list[SelectableItem]:
        """One ``post`` item per slug, labelled with the post title."""
        return [
            SelectableItem(
                id=slug,
                label=self._corpus.post_title(slug),
                type=ItemType.POST,
                kind=ItemKind.POST,
                data={"slug": slug},
            )
            for slug in slugs
        ]

    def _post_lines(self, slugs: list[str]) -> list[str]:
        return [f"{number(i)}. {self._corpus.post_title(slug)}" for i, slug in enumerate(slugs)]

    # ------------------------------------------------------------------
    # Entity profiles
    # ------------------------------------------------------------------

    def entity_profile(self, kind: EntityKind, name: str) -> CommandResult:
        """Profile of a company, investor, person or topic plus its posts.

        Raises
        ------
        EntityNotFoundError
            When *name* matches no entity of *kind*, ignoring case.
        """
        canonical, aggregate = corpus_queries.resolve_entity(self._corpus, kind, name)

        # Displayed counts always come from the post list itself.
        mentions = f"{aggregate.post_count} posts"
        if kind is EntityKind.TOPIC:
            fields = {"TOPIC": canonical, "MENTIONS": mentions}
        elif kind is EntityKind.PERSON:
            fields = {"NAME": canonical, "ROLE": aggregate.role or "Unknown", "MENTIONS": mentions}
        else:
            fields = {"NAME": canonical, "MENTIONS": mentions}
            if kind is EntityKind.COMPANY and aggregate.description:
                fields["ABOUT"] = aggregate.description

        output = build_box([
            header(_PROFILE_HEADERS[kind]),
            key_value(fields),
            divider(),
            text("RELATED POSTS:" if kind is EntityKind.TOPIC else "POSTS:"),
            list_section(self._post_lines(aggregate.posts)),
            divider(),
            text(OPEN_POST_HINT),
        ])

        logger.debug("entity_profile_rendered", kind=kind.value, name=canonical)
        return CommandResult(
            type=ResultType(kind.value),
            content=output,
            data={kind.value: canonical, "selectable_items": self.post_items(aggregate.posts)},
        )

    def portfolio_profile(self, entry: PortfolioEntry) -> CommandResult:
        """Profile of a portfolio company.

        The listing and the corpus are joined by a case-insensitive name
        match.  With a match the company's posts become the new list;
        without one the result carries no list and the current list stays.
        """
        company = entry.company
        fields: dict[str, str] = {"NAME": company.name, "FUND": entry.fund.value}
        if company.tags:
            fields["TAGS"] = ", ".join(company.tags)
        if company.url:
            fields["WEBSITE"] = company.url
        if company.formerly:
            fields["FORMERLY"] = company.formerly
        if company.acquired_by:
            fields["ACQUIRED BY"] = company.acquired_by

        sections = [header("PORTFOLIO COMPANY"), key_value(fields), divider()]
        data: dict = {"company": company.name, "fund": entry.fund.value}

        canonical = self._corpus.find_entity(EntityKind.COMPANY, company.name)
        if canonical is None:
            sections.append(text("No posts mention this company yet."))
        else:
            posts = self._corpus.entities.companies[canonical].posts
            sections += [
                text("POSTS:"),
                list_section(self._post_lines(posts)),
                divider(),
                text(OPEN_POST_HINT),
            ]
            data["selectable_items"] = self.post_items(posts)

        return CommandResult(type=ResultType.PORTFOLIO, content=build_box(sections), data=data)

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    def show_post(self, slug: str) -> CommandResult:
        """Signal the shell to open ``/news/<slug>/``."""
        post = self._corpus.get_post(slug)
        if post is None:
            return CommandResult.error(f'Post "{slug}" not found.')

        url = post_url(slug)
        output = build_box([
            header("OPENING POST"),
            key_value({
                "TITLE": post.display_title,
                "AUTHOR": post.author or "Unknown",
                "DATE": post.pub_date or "Unknown",
            }),
            divider(),
            text(f"Opening: {url}"),
            empty(),
            text("Click the link above or it will open automatically."),
        ])
        return CommandResult(
            type=ResultType.POST,
            content=output,
            data={"slug": slug, "url": url, "auto_open": True},
        )

    # ------------------------------------------------------------------
    # Random cards
    # ------------------------------------------------------------------

    def random_showcase(self) -> CommandResult:
        """Uniformly pick a company, person, fact, figure or quote."""
        category = self._rng.choice(_RANDOM_CATEGORIES)
        logger.debug("random_showcase", category=category)
        if category == "company":
            return self.random_entity(EntityKind.COMPANY)
        if category == "person":
            return self.random_entity(EntityKind.PERSON)
        if category == "fact":
            return self.random_fact()
        if category == "figure":
            return self.random_figure()
        return self.random_quote()

    def random_entity(self, kind: EntityKind) -> CommandResult:
        names = list(self._corpus.entity_map(kind))
        if not names:
            return CommandResult.text(f"No {kind.list_verb} found in the corpus.")
        return self.entity_profile(kind, self._rng.choice(names))

    def random_fact(self) -> CommandResult:
        candidates = [(slug, post) for slug, post in self._corpus.posts.items() if post.facts]
        if not candidates:
            return CommandResult.text("No facts found in the corpus.")
        slug, post = self._rng.choice(candidates)
        fact = self._rng.choice(post.facts)

        body = [f'"{line}"' if i == 0 else line for i, line in enumerate(self._wrap(fact.text))]
        body += [
            "",
            f"Category: {fact.category.value}",
            f"Source: {truncate(post.display_title, 40, always_ellipsis=True)}",
            "",
            f"READ MORE: {post_url(slug)}",
        ]
        return CommandResult(
            type=ResultType.FACT,
            content=framed_card("RANDOM FACT", body, self._box_width),
            data={"slug": slug, "url": post_url(slug)},
        )

    def random_figure(self) -> CommandResult:
        candidates = [(slug, post) for slug, post in self._corpus.posts.items() if post.figures]
        if not candidates:
            return CommandResult.text("No figures found in the corpus.")
        slug, post = self._rng.choice(candidates)
        figure = self._rng.choice(post.figures)

        body = [f"Value: {figure.value} {figure.unit}".rstrip()]
        body += self._wrap(f"Context: {figure.context}")
        body.append(f"Source: {truncate(post.display_title, 40, always_ellipsis=True)}")
        return CommandResult.text(
            framed_card("RANDOM FIGURE", body, self._box_width),
            slug=slug,
            url=post_url(slug),
        )

    def random_quote(self) -> CommandResult:
        quotes = self._corpus.quotes
        if not quotes:
            return CommandResult.text("No quotes found in the corpus.")
        index = self._rng.randrange(len(quotes))
        quote = quotes[index]

        body = self._wrap(f'"{quote.quote}"')
        body += ["", f"— {quote.speaker}"]
        if quote.context:
            body.append(f"Context: {quote.context[:50]}")
        if quote.pub_date:
            body.append(f"Date: {quote.pub_date}")
        body += ["", f"From: {quote.post_title[:50]}"]
        return CommandResult.text(
            framed_card("QUOTE OF THE DAY", body, self._box_width),
            quote_id=self._corpus.quote_id(index),
            url=f"/showcase/quotes/{self._corpus.quote_id(index)}/",
        )

    def _wrap(self, content: str) -> list[str]:
        return wrap_text(content, max(self._box_width - 6, 10))

    # ------------------------------------------------------------------
    # Aggregate views
    # ------------------------------------------------------------------

    def connections(self, args: str) -> CommandResult:
        """Posts mentioning both entities named in *args*."""
        first, second = corpus_queries.parse_connection_args(args)
        first_posts = corpus_queries.find_entity_posts(self._corpus, first)
        second_posts = corpus_queries.find_entity_posts(self._corpus, second)
        if first_posts is None or second_posts is None:
            return CommandResult.error(f'One or both entities not found: "{first}", "{second}"')

        shared = corpus_queries.common_posts(first_posts, second_posts)
        if not shared:
            return CommandResult(
                type=ResultType.CONNECTION,
                content=f'No direct connections found between "{first}" and "{second}".',
                data={"entities": [first, second], "posts": []},
            )

        body = [f'"{first}" ←→ "{second}"', "", f"{len(shared)} common post(s) found:", ""]
        for slug in shared:
            body.append(f"• {truncate(self._corpus.post_title(slug), 50, always_ellipsis=True)}")
            body.append(f"  {post_url(slug)}")
        return CommandResult(
            type=ResultType.CONNECTION,
            content=framed_card("CONNECTIONS", body, self._box_width),
            data={"entities": [first, second], "posts": shared},
        )

    def timeline(self, company: str) -> CommandResult:
        canonical, entries = corpus_queries.timeline_entries(self._corpus, company)
        body = []
        for entry in entries:
            body.append(f"{entry.date} → {truncate(entry.title, 35, always_ellipsis=True)}")
            body.append(f"             {post_url(entry.slug)}")
        return CommandResult(
            type=ResultType.TIMELINE,
            content=framed_card(f"TIMELINE: {canonical}", body, self._box_width),
            data={"company": canonical, "dates": [entry.date for entry in entries]},
        )

    def stats(self) -> CommandResult:
        corpus = self._corpus
        lines = [
            "",
            ">> CORPUS STATISTICS",
            STATS_RULE,
            "",
            "📊 OVERVIEW:",
            f"  Total Posts: {len(corpus.posts)}",
            f"  Companies Mentioned: {len(corpus.entities.companies)}",
            f"  Investors Mentioned: {len(corpus.entities.investors)}",
            f"  People Mentioned: {len(corpus.entities.people)}",
            f"  Topics Identified: {len(corpus.entities.topics)}",
            f"  Quotes Captured: {len(corpus.quotes)}",
        ]

        if corpus.portfolio is not None:
            lines += [
                "",
                "💼 PORTFOLIO:",
                f"  Total Companies: {corpus.portfolio.count()}",
            ]
            lines += [
                f"  {fund.value}: {len(corpus.portfolio.bucket(fund))}" for fund in FundBucket
            ]

        lines += ["", "🏆 TOP MENTIONS:"]
        for kind in EntityKind:
            top = corpus_queries.top_entity(corpus, kind)
            lines.append(f"  Most Mentioned {kind.value.capitalize()}: {top[0] if top else 'N/A'}")
            lines.append(f"    ({top[1].post_count if top else 0} mentions)")
        lines.append("")

        return CommandResult(type=ResultType.STATS, content="\n".join(lines))
