"""Output helpers shared by commands and the query engine."""

from pwv_terminal.commands.helpers.box_builder import (
    BoxSection,
    SectionKind,
    build_box,
    divider,
    empty,
    format_box_line,
    framed_card,
    header,
    key_value,
    list_section,
    text,
)
from pwv_terminal.commands.helpers.text import (
    generate_slug,
    number,
    speech_bubble,
    truncate,
    wrap_text,
)

__all__ = [
    "BoxSection",
    "SectionKind",
    "build_box",
    "divider",
    "empty",
    "format_box_line",
    "framed_card",
    "generate_slug",
    "header",
    "key_value",
    "list_section",
    "number",
    "speech_bubble",
    "text",
    "truncate",
    "wrap_text",
]
