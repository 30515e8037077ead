"""Small text helpers shared by commands: slugs, wrapping, speech bubbles."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w-]")

BUBBLE_WRAP_WIDTH = 50
BUBBLE_MIN_WIDTH = 10


def generate_slug(name: str) -> str:
    """``"Acme Corp."`` -> ``"acme-corp"``."""
    return _NON_SLUG_RE.sub("", _WHITESPACE_RE.sub("-", name.lower()))


def truncate(value: str, limit: int, always_ellipsis: bool = False) -> str:
    """Cut *value* to *limit* characters and mark the cut with ``...``.

    With ``always_ellipsis`` the marker is appended even when nothing was
    cut, which is how post titles are shown in list footers.
    """
    if len(value) > limit:
        return value[:limit] + "..."
    return value + "..." if always_ellipsis else value


def number(index: int, width: int = 2) -> str:
    """1-based list number right-aligned to *width* (``" 1"``, ``"10"``)."""
    return str(index + 1).rjust(width)


def wrap_text(content: str, max_width: int = BUBBLE_WRAP_WIDTH) -> list[str]:
    """Greedy word wrap that keeps explicit newlines.

    Paragraphs that already fit are kept verbatim; a single word longer
    than *max_width* is placed on its own line unbroken.
    """
    lines: list[str] = []
    for paragraph in content.split("\n"):
        if len(paragraph) <= max_width:
            lines.append(paragraph)
            continue
        current = ""
        for word in paragraph.split(" "):
            if len(f"{current} {word}".strip()) <= max_width:
                current = f"{current} {word}" if current else word
            else:
                if current:
                    lines.append(current)
                current = word
        if current:
            lines.append(current)
    return lines


def speech_bubble(content: str) -> str:
    """Draw the cowsay-style bubble around *content* (no trailing art).

    One line is drawn as ``< text >``; several lines use ``/ \\`` corners
    and ``| |`` sides.
    """
    lines = wrap_text(content) or [""]
    width = max([len(line) for line in lines] + [BUBBLE_MIN_WIDTH])

    out = [" " + "_" * (width + 2)]
    if len(lines) == 1:
        out.append(f"< {lines[0].ljust(width)} >")
    else:
        last = len(lines) - 1
        for i, line in enumerate(lines):
            padded = line.ljust(width)
            if i == 0:
                out.append(f"/ {padded} \\")
            elif i == last:
                out.append(f"\\ {padded} /")
            else:
                out.append(f"| {padded} |")
    out.append(" " + "-" * (width + 2))
    return "\n".join(out) + "\n"
