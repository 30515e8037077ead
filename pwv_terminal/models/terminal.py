"""Result and session models exchanged between commands, engine and shell.

A command returns a :class:`CommandResult`; when its ``data`` carries a
``selectable_items`` list, the query engine replaces the session's active
list with it.  :class:`SelectableItem` records both the public ``type``
tag shown to callers and an explicit internal :class:`ItemKind` assigned
where the item is built, so numeric selection never has to infer what an
item is from the shape of its payload.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResultType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Renderable kind of a command result."""

    TEXT = "text"
    COMPANY = "company"
    INVESTOR = "investor"
    PERSON = "person"
    TOPIC = "topic"
    FACT = "fact"
    CONNECTION = "connection"
    TIMELINE = "timeline"
    STATS = "stats"
    ERROR = "error"
    LIST = "list"
    POST = "post"
    NEWSLETTER = "newsletter"
    PORTFOLIO = "portfolio"


class CommandCategory(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Help-text grouping for a command."""

    LIST = "list"
    SHOWCASE = "showcase"
    EXPLORATION = "exploration"
    OTHER = "other"


class ItemType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Public type tag of a selectable item."""

    COMPANY = "company"
    INVESTOR = "investor"
    PERSON = "person"
    TOPIC = "topic"
    POST = "post"
    FACT = "fact"
    QUOTE = "quote"


class ItemKind(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Internal discriminator used by numeric selection.

    Matches :class:`ItemType` except that portfolio companies get their own
    ``PORTFOLIO_COMPANY`` kind while still being tagged ``company`` publicly.
    """

    COMPANY = "company"
    PORTFOLIO_COMPANY = "portfolio_company"
    INVESTOR = "investor"
    PERSON = "person"
    TOPIC = "topic"
    POST = "post"
    FACT = "fact"
    QUOTE = "quote"


class SelectableItem(BaseModel):
    """One entry of the numbered list that a bare integer resolves against."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    type: ItemType
    kind: ItemKind
    data: Any = None


class CommandResult(BaseModel):
    """What every command (and the engine itself) returns for one input.

    ``content`` is preformatted display text.  ``data`` carries the
    command-specific payload (``url``, ``slug``, ``auto_open`` ...) and,
    optionally, ``selectable_items``.
    """

    model_config = ConfigDict(frozen=True)

    type: ResultType
    content: str
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def selectable_items(self) -> list[SelectableItem] | None:
        return self.data.get("selectable_items")

    @property
    def is_error(self) -> bool:
        return self.type is ResultType.ERROR

    @classmethod
    def text(cls, content: str, **data: Any) -> CommandResult:
        return cls(type=ResultType.TEXT, content=content, data=data)

    @classmethod
    def error(cls, message: str) -> CommandResult:
        return cls(type=ResultType.ERROR, content=message)


class HistoryEntry(BaseModel):
    """One scrollback entry kept by the interactive shell."""

    model_config = ConfigDict(frozen=True)

    command: str
    result: CommandResult
    timestamp: datetime.datetime = Field(default_factory=datetime.datetime.now)
