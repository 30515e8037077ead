"""Domain models -- re-exports all public model classes.

The models are organized across three submodules by concern:
    - corpus.py    -- Posts, entity aggregates, quotes and the Corpus root
    - portfolio.py -- Static portfolio and team listings
    - terminal.py  -- Command results, selectable items, shell history
"""

from __future__ import annotations

# --- Corpus models: the offline-extracted entity graph ---
from pwv_terminal.models.corpus import (
    Corpus,
    DateRange,
    EntityAggregate,
    EntityIndex,
    EntityKind,
    ExtractionMetadata,
    Fact,
    FactCategory,
    Figure,
    PersonMention,
    Post,
    PostQuote,
    Quote,
    SourcedFact,
    SourcedFigure,
)
# --- Static listings ---
from pwv_terminal.models.portfolio import (
    FundBucket,
    PortfolioCompany,
    PortfolioEntry,
    PortfolioListing,
    TeamMember,
)
# --- Terminal session models ---
from pwv_terminal.models.terminal import (
    CommandCategory,
    CommandResult,
    HistoryEntry,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)

__all__ = [
    "CommandCategory",
    "CommandResult",
    "Corpus",
    "DateRange",
    "EntityAggregate",
    "EntityIndex",
    "EntityKind",
    "ExtractionMetadata",
    "Fact",
    "FactCategory",
    "Figure",
    "FundBucket",
    "HistoryEntry",
    "ItemKind",
    "ItemType",
    "PersonMention",
    "PortfolioCompany",
    "PortfolioEntry",
    "PortfolioListing",
    "Post",
    "PostQuote",
    "Quote",
    "ResultType",
    "SelectableItem",
    "SourcedFact",
    "SourcedFigure",
    "TeamMember",
]
