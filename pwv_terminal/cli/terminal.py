"""Interactive PWV discovery terminal.

Usage::

    pwv-terminal
    pwv-terminal --corpus data/entities.json --width 80
    pwv-terminal -c "companies"        # run one command and exit

The shell is presentation only: it reads a line, hands it to
:class:`~pwv_terminal.services.query_engine.QueryEngine`, keeps a
scrollback of :class:`~pwv_terminal.models.terminal.HistoryEntry` values
and renders each result with rich.  When a result asks to open a post it
schedules the browser on a timer and carries on; nothing waits for it.
"""

from __future__ import annotations

import argparse
import sys
import threading
import webbrowser
from collections import deque
from collections.abc import Callable, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from pwv_terminal.config.loader import load_config
from pwv_terminal.config.settings import Settings
from pwv_terminal.models.corpus import Corpus, EntityKind
from pwv_terminal.models.terminal import CommandResult, HistoryEntry, ResultType
from pwv_terminal.providers.corpus.json_corpus_provider import JsonCorpusProvider
from pwv_terminal.services.query_engine import QueryEngine
from pwv_terminal.utils.errors import TerminalError
from pwv_terminal.utils.logging import configure_logging, get_logger

EXIT_WORDS = frozenset({"exit", "quit"})
CLEAR_WORDS = frozenset({"clear", "cls"})
INLINE_VERBS = ("help", "showcase", "discover", "timeline", "connections", "connect")

DEFAULT_PROMPT = "pwv> "
DEFAULT_HISTORY_SIZE = 500
MAX_ENTITY_SUGGESTIONS = 5

_SHOWCASE_KINDS = {kind.value: kind for kind in EntityKind}


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------


class TerminalCompleter(Completer):
    """Suggests verbs, and entity names after ``showcase <kind> ``."""

    def __init__(self, verbs: Iterable[str], corpus: Corpus) -> None:
        self._verbs = sorted(set(verbs))
        self._corpus = corpus

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        lowered = text.lower()

        parts = lowered.split(" ", 2)
        if len(parts) == 3 and parts[0] in ("showcase", "discover") and parts[1] in _SHOWCASE_KINDS:
            typed = text.split(" ", 2)[2]
            for name in self.entity_suggestions(_SHOWCASE_KINDS[parts[1]], typed):
                yield Completion(name, start_position=-len(typed))
            return

        if " " in lowered:
            return
        for verb in self._verbs:
            if verb.startswith(lowered):
                yield Completion(verb, start_position=-len(text))

    def entity_suggestions(self, kind: EntityKind, typed: str) -> list[str]:
        """Up to five names of *kind* starting with *typed*, ignoring case."""
        prefix = typed.lower()
        matches = [name for name in self._corpus.entity_map(kind) if name.lower().startswith(prefix)]
        return matches[:MAX_ENTITY_SUGGESTIONS]


# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------


class TerminalShell:
    """Read-eval-print loop over a :class:`QueryEngine`."""

    def __init__(
        self,
        engine: QueryEngine,
        console: Console,
        settings: Settings,
        terminal_config: dict | None = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        opener: Callable[[str], object] = webbrowser.open,
    ) -> None:
        terminal_config = terminal_config or {}
        self._engine = engine
        self._console = console
        self._settings = settings
        self._prompt = terminal_config.get("prompt", DEFAULT_PROMPT)
        self._banner = terminal_config.get("banner", "")
        self._history: deque[HistoryEntry] = deque(
            maxlen=terminal_config.get("history_size", DEFAULT_HISTORY_SIZE)
        )
        self._timer_factory = timer_factory
        self._opener = opener
        self._logger = get_logger(__name__)

    @property
    def history(self) -> list[HistoryEntry]:
        return list(self._history)

    def submit(self, line: str) -> CommandResult | None:
        """Run one input line and render its result.

        Returns None for blank input and for ``clear``, which the shell
        handles itself.
        """
        command = line.strip()
        if not command:
            return None
        if command.lower() in CLEAR_WORDS:
            self._history.clear()
            self._console.clear()
            return None

        result = self._engine.execute_command(command)
        self._history.append(HistoryEntry(command=command, result=result))
        self.render(result)
        if result.type is ResultType.POST and result.data.get("auto_open"):
            self.schedule_open(result.data["url"])
        return result

    def render(self, result: CommandResult) -> None:
        if not result.content:
            return
        style = "red" if result.is_error else None
        self._console.print(result.content, style=style, markup=False, highlight=False)

    def schedule_open(self, url: str) -> threading.Timer | None:
        """Open *url* in the browser after the configured delay."""
        if not self._settings.auto_open_posts:
            return None
        target = f"{self._settings.site_base_url.rstrip('/')}{url}"
        timer = self._timer_factory(self._settings.auto_open_delay, self._opener, args=(target,))
        timer.daemon = True
        timer.start()
        self._logger.debug("post_open_scheduled", url=target)
        return timer

    def completer(self) -> TerminalCompleter:
        verbs = list(INLINE_VERBS)
        for command in self._engine.registry:
            verbs.append(command.name)
            verbs.extend(alias.strip() for alias in command.aliases if " " not in alias.strip())
        return TerminalCompleter(verbs, self._engine.corpus)

    def run(self) -> None:
        """Prompt until ``exit``, ``quit``, EOF or Ctrl-C."""
        session: PromptSession = PromptSession(
            history=InMemoryHistory(),
            completer=self.completer(),
        )
        if self._banner:
            self._console.print(self._banner, markup=False, highlight=False)

        while True:
            try:
                line = session.prompt(self._prompt)
            except (KeyboardInterrupt, EOFError):
                break
            if line.strip().lower() in EXIT_WORDS:
                break
            self.submit(line)
        self._console.print("Goodbye.", markup=False)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwv-terminal",
        description="Explore the PWV blog corpus from an interactive terminal.",
    )
    parser.add_argument("--corpus", default=None, help="Path to the aggregated entities JSON.")
    parser.add_argument("--portfolio", default=None, help="Path to the portfolio YAML listing.")
    parser.add_argument("--team", default=None, help="Path to the team YAML listing.")
    parser.add_argument("--width", type=int, default=None, help="Box width for rendered output.")
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Never open posts in the browser.",
    )
    parser.add_argument(
        "--command", "-c",
        default=None,
        help="Run a single command, print its result and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load the corpus, build the engine and run the shell.

    Returns 0 on success and 1 when the corpus cannot be loaded or a
    one-shot command produced an error.
    """
    args = _build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in {
            "corpus_path": args.corpus,
            "portfolio_path": args.portfolio,
            "team_path": args.team,
            "box_width": args.width,
        }.items()
        if value is not None
    }
    if args.no_open:
        overrides["auto_open_posts"] = False
    settings = Settings(**overrides)

    # Log lines go to stderr so they never interleave with rendered output.
    configure_logging(log_level="WARNING", stream=sys.stderr)
    config = load_config(settings=settings)

    try:
        corpus = JsonCorpusProvider.from_settings(settings).load()
    except TerminalError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    engine = QueryEngine(corpus, box_width=settings.box_width)
    shell = TerminalShell(engine, Console(), settings, config.get("terminal", {}))

    if args.command is not None:
        result = shell.submit(args.command)
        return 1 if result is not None and result.is_error else 0

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
