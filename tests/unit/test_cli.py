"""Unit tests for the interactive terminal shell and the two CLI entry points."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, call, patch

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from rich.console import Console

from pwv_terminal.cli import extract as extract_cli
from pwv_terminal.cli import terminal as terminal_cli
from pwv_terminal.cli.terminal import TerminalCompleter, TerminalShell
from pwv_terminal.config.settings import Settings
from pwv_terminal.models.corpus import Corpus, EntityKind
from pwv_terminal.models.terminal import ResultType
from pwv_terminal.services.query_engine import QueryEngine


# ======================================================================
# Helpers
# ======================================================================


def _settings(**overrides: Any) -> Settings:
    defaults: dict[str, Any] = {
        "site_base_url": "https://pwv.com/",
        "auto_open_posts": True,
        "auto_open_delay": 0.25,
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def _make_shell(
    engine: QueryEngine,
    terminal_config: dict | None = None,
    **settings_overrides: Any,
) -> tuple[TerminalShell, MagicMock, MagicMock]:
    console = MagicMock(spec=Console)
    timer_factory = MagicMock()
    shell = TerminalShell(
        engine,
        console,
        _settings(**settings_overrides),
        terminal_config,
        timer_factory=timer_factory,
        opener=MagicMock(),
    )
    return shell, console, timer_factory


@pytest.fixture
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLIs from reconfiguring structlog onto pytest's capture streams."""
    monkeypatch.setattr(terminal_cli, "configure_logging", MagicMock())
    monkeypatch.setattr(extract_cli, "configure_logging", MagicMock())


# ======================================================================
# TerminalShell
# ======================================================================


class TestTerminalShell:
    def test_blank_input_is_ignored(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine)
        assert shell.submit("   ") is None
        console.print.assert_not_called()
        assert shell.history == []

    def test_submit_renders_and_records(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine)

        result = shell.submit("companies")

        assert result.type == ResultType.LIST
        console.print.assert_called_once_with(result.content, style=None, markup=False, highlight=False)
        assert [entry.command for entry in shell.history] == ["companies"]

    def test_errors_render_in_red(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine)

        result = shell.submit("teleport")

        assert result.is_error
        assert console.print.call_args.kwargs["style"] == "red"

    def test_clear_empties_history(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine)
        shell.submit("companies")

        assert shell.submit("CLS") is None
        console.clear.assert_called_once()
        assert shell.history == []

    def test_history_is_bounded(self, engine: QueryEngine) -> None:
        shell, _, _ = _make_shell(engine, {"history_size": 2})
        for command in ("companies", "people", "topics"):
            shell.submit(command)
        assert [entry.command for entry in shell.history] == ["people", "topics"]

    def test_selected_post_is_opened_after_delay(self, engine: QueryEngine) -> None:
        shell, _, timer_factory = _make_shell(engine)
        shell.submit("companies")
        shell.submit("1")

        result = shell.submit("1")

        assert result.type == ResultType.POST
        timer_factory.assert_called_once_with(
            0.25, shell._opener, args=("https://pwv.com/news/acme-seed/",)
        )
        timer = timer_factory.return_value
        assert timer.daemon is True
        timer.start.assert_called_once()

    def test_auto_open_can_be_disabled(self, engine: QueryEngine) -> None:
        shell, _, timer_factory = _make_shell(engine, auto_open_posts=False)
        assert shell.schedule_open("/news/acme-seed/") is None
        timer_factory.assert_not_called()

    def test_run_until_exit(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine, {"banner": "WELCOME"})

        with patch.object(terminal_cli, "PromptSession") as session_cls:
            session_cls.return_value.prompt.side_effect = ["companies", "exit", "people"]
            shell.run()

        assert [entry.command for entry in shell.history] == ["companies"]
        assert console.print.call_args_list[0] == call("WELCOME", markup=False, highlight=False)
        assert console.print.call_args_list[-1] == call("Goodbye.", markup=False)

    def test_run_stops_on_eof(self, engine: QueryEngine) -> None:
        shell, console, _ = _make_shell(engine)

        with patch.object(terminal_cli, "PromptSession") as session_cls:
            session_cls.return_value.prompt.side_effect = EOFError
            shell.run()

        console.print.assert_called_once_with("Goodbye.", markup=False)


# ======================================================================
# Completion
# ======================================================================


class TestTerminalCompleter:
    def _completions(self, completer: TerminalCompleter, text: str) -> list[str]:
        document = Document(text, cursor_position=len(text))
        return [c.text for c in completer.get_completions(document, CompleteEvent())]

    def test_verbs(self, engine: QueryEngine) -> None:
        shell, _, _ = _make_shell(engine)
        completions = self._completions(shell.completer(), "comp")
        assert "companies" in completions

    def test_inline_and_alias_verbs_are_offered(self, engine: QueryEngine) -> None:
        shell, _, _ = _make_shell(engine)
        assert "showcase" in self._completions(shell.completer(), "sho")
        assert "bsky" in self._completions(shell.completer(), "bs")

    def test_entity_names_after_showcase_kind(self, corpus: Corpus) -> None:
        completer = TerminalCompleter(["showcase"], corpus)
        assert self._completions(completer, "showcase company ac") == ["Acme"]
        assert self._completions(completer, "showcase person ") == ["Jane Doe", "Tom Preston-Werner"]

    def test_no_verb_completion_after_a_space(self, corpus: Corpus) -> None:
        completer = TerminalCompleter(["companies"], corpus)
        assert self._completions(completer, "companies x") == []

    def test_suggestions_are_capped(self) -> None:
        corpus = Corpus.model_validate({
            "entities": {"topics": {f"ai {i}": {"posts": [], "mentions": 0} for i in range(8)}},
        })
        completer = TerminalCompleter([], corpus)
        assert len(completer.entity_suggestions(EntityKind.TOPIC, "AI")) == 5


# ======================================================================
# pwv-terminal main()
# ======================================================================


class TestTerminalMain:
    @pytest.fixture
    def corpus_file(
        self, tmp_path: Path, corpus_document: dict[str, Any], monkeypatch: pytest.MonkeyPatch
    ) -> Path:
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "entities.json"
        path.write_text(json.dumps(corpus_document), encoding="utf-8")
        return path

    def test_one_shot_command(
        self, corpus_file: Path, quiet_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = terminal_cli.main(["--corpus", str(corpus_file), "--no-open", "-c", "companies"])

        assert exit_code == 0
        assert "1. Acme (3 mentions)" in capsys.readouterr().out

    def test_one_shot_error_exits_non_zero(self, corpus_file: Path, quiet_logging: None) -> None:
        assert terminal_cli.main(["--corpus", str(corpus_file), "-c", "teleport"]) == 1

    def test_missing_corpus(
        self, tmp_path: Path, quiet_logging: None, capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        exit_code = terminal_cli.main(["--corpus", str(tmp_path / "missing.json"), "-c", "help"])

        assert exit_code == 1
        assert "Error: Corpus file not found" in capsys.readouterr().err


# ======================================================================
# pwv-extract main()
# ======================================================================


class TestExtractMain:
    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, quiet_logging: None) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("OPENAI_API_KEY", "FAL_KEY", "AI_PROVIDER"):
            monkeypatch.delenv(name, raising=False)

    @pytest.mark.parametrize("value", ["0", "-3", "ten"])
    def test_positive_int_rejects(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            extract_cli._positive_int(value)

    def test_positive_int_accepts(self) -> None:
        assert extract_cli._positive_int("12") == 12

    def test_missing_openai_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert extract_cli.main(["--provider", "openai"]) == 1
        assert "OPENAI_API_KEY not set" in capsys.readouterr().err

    def test_unreachable_lmstudio(self, mock_llm: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_llm.get_provider_name.return_value = "lmstudio"
        mock_llm.validate_credentials.return_value = False

        with patch.object(extract_cli, "build_llm_provider", return_value=mock_llm):
            assert extract_cli.main([]) == 1

        assert "Cannot reach LM Studio" in capsys.readouterr().err

    def test_full_run(
        self, tmp_path: Path, mock_llm: MagicMock, monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        posts_dir = tmp_path / "posts"
        posts_dir.mkdir()
        (posts_dir / "hello.md").write_text("---\ntitle: Hello\n---\nHi.", encoding="utf-8")
        monkeypatch.setenv("RECORDS_DIR", str(tmp_path / "records"))
        mock_llm.complete.return_value = json.dumps({"companies": ["Acme"], "topics": ["ai"]})

        with patch.object(extract_cli, "build_llm_provider", return_value=mock_llm):
            exit_code = extract_cli.main([
                "--posts-dir", str(posts_dir),
                "--output", str(tmp_path / "entities.json"),
            ])

        assert exit_code == 0
        assert "Extracted 1 posts: 1 companies" in capsys.readouterr().out
        assert (tmp_path / "records" / "hello.json").exists()
        assert (tmp_path / "entities.json").exists()

    def test_missing_posts_dir(self, tmp_path: Path, mock_llm: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(extract_cli, "build_llm_provider", return_value=mock_llm):
            exit_code = extract_cli.main(["--posts-dir", str(tmp_path / "nope")])

        assert exit_code == 1
        assert "Posts directory not found" in capsys.readouterr().err
