"""Section-based builder for terminal output blocks.

Commands describe their output as an ordered list of :class:`BoxSection`
values and :func:`build_box` flattens them into preformatted text::

    build_box([
        header("All Companies"),
        list_section(["1. Acme (2 mentions)"]),
        divider(),
        text('Type a number to view details (e.g., "1")'),
    ])

renders as::

    (blank)
    >> ALL COMPANIES
    ──────────────────
    (blank)
      1. Acme (2 mentions)
    (blank)
    ────────────────────────────────────────
    Type a number to view details (e.g., "1")
    (blank)

The framed-box helpers at the bottom (``box_top``, ``box_line`` ...) draw
the double-line cards used for standalone random facts, figures and quotes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class SectionKind(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    HEADER = "header"
    KEY_VALUE = "keyValue"
    LIST = "list"
    TEXT = "text"
    EMPTY = "empty"
    DIVIDER = "divider"


@dataclass(frozen=True)
class BoxSection:
    """One block of output: a header, key/value pairs, a list, text ..."""

    kind: SectionKind
    content: str | tuple[str, ...] | tuple[tuple[str, str], ...] | None = field(default=None)


HEADER_RULE_MAX = 50
DIVIDER_WIDTH = 40


# ---------------------------------------------------------------------------
# Section constructors
# ---------------------------------------------------------------------------

def header(title: str) -> BoxSection:
    return BoxSection(SectionKind.HEADER, title)


def key_value(pairs: Mapping[str, object]) -> BoxSection:
    """Key/value block; insertion order of *pairs* is kept."""
    return BoxSection(
        SectionKind.KEY_VALUE,
        tuple((str(key), str(value)) for key, value in pairs.items()),
    )


def list_section(items: Iterable[str]) -> BoxSection:
    return BoxSection(SectionKind.LIST, tuple(items))


def text(content: str) -> BoxSection:
    return BoxSection(SectionKind.TEXT, content)


def empty() -> BoxSection:
    return BoxSection(SectionKind.EMPTY)


def divider() -> BoxSection:
    return BoxSection(SectionKind.DIVIDER)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def build_box(sections: Iterable[BoxSection]) -> str:
    """Render *sections* into one newline-joined block.

    The block always starts and ends with an empty line.
    """
    lines: list[str] = [""]

    for section in sections:
        if section.kind is SectionKind.HEADER and isinstance(section.content, str):
            lines.append(f">> {section.content.upper()}")
            lines.append("─" * min(HEADER_RULE_MAX, len(section.content) + 5))
        elif section.kind is SectionKind.KEY_VALUE and isinstance(section.content, tuple):
            lines.append("")
            lines.extend(f"  {key}: {value}" for key, value in section.content)
        elif section.kind is SectionKind.LIST and isinstance(section.content, tuple):
            lines.append("")
            lines.extend(f"  {item}" for item in section.content)
        elif section.kind is SectionKind.TEXT and isinstance(section.content, str):
            lines.append(section.content)
        elif section.kind is SectionKind.EMPTY:
            lines.append("")
        elif section.kind is SectionKind.DIVIDER:
            lines.append("")
            lines.append("─" * DIVIDER_WIDTH)

    lines.append("")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Framed cards
# ---------------------------------------------------------------------------

def format_box_line(content: str, box_width: int = 64, pad_char: str = " ") -> str:
    """Pad or truncate *content* to the inner width of a framed box.

    The inner width is ``box_width - 4`` (two border characters plus one
    space of padding on each side).  Overlong content is cut and ends in
    ``...``.
    """
    content_width = box_width - 4
    if len(content) > content_width:
        return content[: content_width - 3] + "..."
    return content.ljust(content_width, pad_char)


def box_top(box_width: int = 64) -> str:
    return "╔" + "═" * (box_width - 2) + "╗"


def box_bottom(box_width: int = 64) -> str:
    return "╚" + "═" * (box_width - 2) + "╝"


def box_divider(box_width: int = 64) -> str:
    return "╠" + "═" * (box_width - 2) + "╣"


def box_line(content: str, box_width: int = 64) -> str:
    return "║ " + format_box_line(content, box_width) + " ║"


def box_empty(box_width: int = 64) -> str:
    return box_line("", box_width)


def framed_card(title: str, body: Iterable[str], box_width: int = 64) -> str:
    """Draw a titled double-line card around *body* lines.

    Each body line is fitted with :func:`format_box_line`; long values are
    truncated rather than wrapped.
    """
    lines = [
        box_top(box_width),
        box_line(title.center(box_width - 4).rstrip(), box_width),
        box_divider(box_width),
        box_empty(box_width),
    ]
    lines.extend(box_line(line, box_width) for line in body)
    lines.append(box_empty(box_width))
    lines.append(box_bottom(box_width))
    return "\n" + "\n".join(lines) + "\n"
