"""Dispatch engine for the discovery terminal.

:class:`QueryEngine` owns the immutable corpus, the ordered command
registry and the session's one piece of mutable state: the active
numbered list that a bare integer resolves against.

One call to :meth:`QueryEngine.execute_command` is one turn:

1. blank input returns an empty text result;
2. a bare integer is a numeric selection against the active list;
3. otherwise the registry is scanned in order and the first matching
   Command Object runs;
4. unmatched input falls through to the inline verbs (``help``,
   ``showcase``, ``timeline``, ``connections``);
5. anything else is an "unknown command" error.

Whenever a result carries ``selectable_items`` the active list is replaced
wholesale.  Every failure comes back as an error result; nothing raised
by a command escapes the engine.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Services (the single entry point the shell and CLI call).
# Reads: the Corpus through commands and ProfileRenderer; never writes it.
# State: only the active numbered list, replaced whenever a result
#        carries selectable_items.
#
# Registry order decides ties between overlapping aliases; see
# pwv_terminal/commands/catalog.py.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import random
import re

import structlog

from pwv_terminal.commands.catalog import build_commands
from pwv_terminal.commands.registry import CommandRegistry
from pwv_terminal.models.corpus import Corpus, EntityKind, Quote, SourcedFact
from pwv_terminal.models.portfolio import PortfolioEntry
from pwv_terminal.models.terminal import (
    CommandCategory,
    CommandResult,
    ItemKind,
    SelectableItem,
)
from pwv_terminal.services.profiles import ProfileRenderer
from pwv_terminal.utils.errors import CommandUsageError, SelectionError, TerminalError

logger = structlog.get_logger(logger_name=__name__)

# ─── Input grammar ───
_NUMERIC_RE = re.compile(r"^[0-9]+$")

# ─── Help layout ───
HELP_RULE = "─" * 53

SHOWCASE_USAGE = (
    "Invalid showcase command. Try:\n"
    "- showcase random\n"
    "- showcase company <name>\n"
    "- showcase investor <name>\n"
    "- showcase person <name>\n"
    "- showcase topic <topic>"
)

_SHOWCASE_KINDS = {
    "company": EntityKind.COMPANY,
    "investor": EntityKind.INVESTOR,
    "person": EntityKind.PERSON,
    "topic": EntityKind.TOPIC,
}

# Inline verbs have no Command Object, so their help lines are kept here.
_STATIC_HELP = {
    CommandCategory.LIST: [("<number>", "Select item from last list")],
    CommandCategory.SHOWCASE: [
        ("showcase random", "Random fact/figure/entity"),
        ("showcase company <name>", "Info about a company"),
        ("showcase investor <name>", "Info about an investor/VC"),
        ("showcase person <name>", "Info about a person"),
        ("showcase topic <topic>", "Posts about a topic"),
    ],
    CommandCategory.EXPLORATION: [
        ("timeline <company>", "Chronological view of mentions"),
        ("connections <A> <B>", "How two entities relate"),
    ],
    CommandCategory.OTHER: [("help", "Show this help message")],
}

_HELP_TITLES = {
    CommandCategory.LIST: "LIST COMMANDS:",
    CommandCategory.SHOWCASE: "SHOWCASE COMMANDS:",
    CommandCategory.EXPLORATION: "EXPLORATION:",
    CommandCategory.OTHER: "OTHER:",
}

_SELECTION_KINDS = (ItemKind.COMPANY, ItemKind.INVESTOR, ItemKind.PERSON, ItemKind.TOPIC)


def _help_line(usage: str, description: str) -> str:
    return f"  • {usage.ljust(22)} {description}"


class QueryEngine:
    """Parses raw input, dispatches it and tracks the active list.

    Parameters
    ----------
    corpus:
        The immutable corpus every command reads.
    registry:
        Ordered command registry.  Built from
        :data:`~pwv_terminal.commands.catalog.ALL_COMMANDS` when omitted.
    box_width:
        Presentation width handed to commands and renderers.
    rng:
        Source of every random pick; tests pass a seeded instance.
    """

    def __init__(
        self,
        corpus: Corpus,
        registry: CommandRegistry | None = None,
        box_width: int = 64,
        rng: random.Random | None = None,
    ) -> None:
        self._corpus = corpus
        self._box_width = box_width
        self._rng = rng or random.Random()
        if registry is None:
            registry = CommandRegistry(build_commands(corpus, box_width, self._rng))
        self._registry = registry
        self._renderer = ProfileRenderer(corpus, box_width, self._rng)
        self._current_list: list[SelectableItem] = []

    @property
    def current_list(self) -> list[SelectableItem]:
        """A copy of the active numbered list."""
        return list(self._current_list)

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def set_box_width(self, width: int) -> None:
        self._box_width = width
        self._renderer.set_box_width(width)
        self._registry.set_box_width(width)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def execute_command(self, raw_input: str) -> CommandResult:
        """Run one turn and return exactly one result."""
        command = raw_input.strip().lower()
        if not command:
            return CommandResult.text("")

        try:
            result = self._dispatch(raw_input.strip(), command)
        except TerminalError as exc:
            logger.debug("command_error", input=command, error=exc.message)
            return CommandResult.error(exc.message)
        except Exception:
            logger.error("command_failed", input=command, exc_info=True)
            return CommandResult.error(
                f"Something went wrong running: {raw_input.strip()}\n"
                "Type 'help' for available commands."
            )

        items = result.selectable_items
        if items is not None:
            self._current_list = list(items)
        return result

    def _dispatch(self, raw_input: str, command: str) -> CommandResult:
        if _NUMERIC_RE.match(command):
            return self._select(int(command))

        matched = self._registry.find(command)
        if matched is not None:
            logger.debug("command_dispatched", command=matched.name)
            return matched.execute(raw_input, raw_input.split()[1:])

        fallback = self._dispatch_inline(raw_input, command)
        if fallback is not None:
            return fallback

        return CommandResult.error(
            f"Unknown command: {raw_input}\nType 'help' for available commands."
        )

    # ------------------------------------------------------------------
    # Numeric selection
    # ------------------------------------------------------------------

    def _select(self, position: int) -> CommandResult:
        if not self._current_list:
            raise SelectionError(
                message='No active list. Try "companies", "people", or "topics" first.'
            )
        if not 1 <= position <= len(self._current_list):
            raise SelectionError(
                message=f"Invalid selection. Please choose 1-{len(self._current_list)}."
            )

        item = self._current_list[position - 1]
        logger.debug("selection_resolved", position=position, kind=item.kind.value, id=item.id)

        if item.kind in _SELECTION_KINDS:
            return self._renderer.entity_profile(EntityKind(item.kind.value), item.id)
        if item.kind is ItemKind.PORTFOLIO_COMPANY and isinstance(item.data, PortfolioEntry):
            return self._renderer.portfolio_profile(item.data)
        if item.kind is ItemKind.POST:
            slug = item.data.get("slug", item.id) if isinstance(item.data, dict) else item.id
            return self._renderer.show_post(slug)
        if item.kind is ItemKind.FACT and isinstance(item.data, SourcedFact):
            return self._renderer.show_post(item.data.post_slug)
        if item.kind is ItemKind.QUOTE and isinstance(item.data, Quote):
            return self._renderer.show_post(item.data.post_slug)

        raise SelectionError(message="Unknown item type.")

    # ------------------------------------------------------------------
    # Inline verbs
    # ------------------------------------------------------------------

    def _dispatch_inline(self, raw_input: str, command: str) -> CommandResult | None:
        verb, _, rest = raw_input.partition(" ")
        verb = verb.lower()
        rest = rest.strip()

        if command in ("help", "?"):
            return self.help()
        if verb in ("showcase", "discover"):
            return self._showcase(rest)
        if verb == "timeline":
            if not rest:
                raise CommandUsageError(message="Usage: timeline <company>")
            return self._renderer.timeline(rest)
        if verb in ("connections", "connect"):
            return self._renderer.connections(rest)
        return None

    def _showcase(self, args: str) -> CommandResult:
        if not args:
            raise CommandUsageError(message=SHOWCASE_USAGE)

        selector, _, name = args.partition(" ")
        selector = selector.lower()
        name = name.strip()

        if selector == "random" and not name:
            return self._renderer.random_showcase()
        kind = _SHOWCASE_KINDS.get(selector)
        if kind is None or not name:
            return CommandResult.error(SHOWCASE_USAGE)
        return self._renderer.entity_profile(kind, name)

    def help(self) -> CommandResult:
        """Help text grouped by category, merging registry and inline verbs."""
        lines = ["", ">> PWV DISCOVERY TERMINAL", HELP_RULE]
        groups = self._registry.by_category()
        for category in CommandCategory:
            entries = [(cmd.usage, cmd.description) for cmd in groups[category]]
            static = _STATIC_HELP.get(category, [])
            # The selection hint reads best at the end of the list group,
            # the help entry at the top of "other".
            entries = static + entries if category is CommandCategory.OTHER else entries + static
            if not entries:
                continue
            lines += ["", _HELP_TITLES[category]]
            lines += [_help_line(usage, description) for usage, description in entries]

        lines += [
            "",
            HELP_RULE,
            "",
            "TIP: Type 'companies' to see all companies, then type a number.",
            "Example: companies → 1 → (shows company details)",
            "",
        ]
        return CommandResult.text("\n".join(lines))
