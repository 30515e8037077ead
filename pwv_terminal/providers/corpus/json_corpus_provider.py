"""Corpus provider backed by the aggregated entities JSON file.

Reads the document written by ``pwv-extract`` and merges in the static
portfolio and team listings, which live in separate YAML files because
they are edited by hand rather than extracted.  Listings already embedded
in the JSON document are kept unless a YAML file replaces them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from pwv_terminal.config.settings import Settings
from pwv_terminal.interfaces.corpus_provider import ICorpusProvider
from pwv_terminal.models.corpus import Corpus
from pwv_terminal.utils.errors import CorpusLoadError

logger = structlog.get_logger(logger_name=__name__)


class JsonCorpusProvider(ICorpusProvider):
    """Load a :class:`Corpus` from JSON plus optional YAML listings."""

    def __init__(
        self,
        corpus_path: str | Path,
        portfolio_path: str | Path | None = None,
        team_path: str | Path | None = None,
    ) -> None:
        self._corpus_path = Path(corpus_path)
        self._portfolio_path = Path(portfolio_path) if portfolio_path else None
        self._team_path = Path(team_path) if team_path else None

    @classmethod
    def from_settings(cls, settings: Settings) -> JsonCorpusProvider:
        return cls(
            corpus_path=settings.corpus_path,
            portfolio_path=settings.portfolio_path,
            team_path=settings.team_path,
        )

    # ------------------------------------------------------------------
    # ICorpusProvider implementation
    # ------------------------------------------------------------------

    def load(self) -> Corpus:
        document = self._read_json(self._corpus_path)

        portfolio = self._read_yaml(self._portfolio_path)
        if portfolio is not None:
            if not isinstance(portfolio, dict):
                raise CorpusLoadError(
                    message=f"Portfolio listing {self._portfolio_path} must be a mapping of fund buckets",
                    provider_name=self.get_provider_name(),
                )
            document["portfolio"] = portfolio.get("portfolio", portfolio)

        team = self._read_yaml(self._team_path)
        if team is not None:
            document["team"] = team.get("team", []) if isinstance(team, dict) else team

        try:
            corpus = Corpus.model_validate(document)
        except ValidationError as exc:
            raise CorpusLoadError(
                message=f"Invalid corpus document {self._corpus_path}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        logger.info(
            "corpus_loaded",
            path=str(self._corpus_path),
            posts=len(corpus.posts),
            companies=len(corpus.entities.companies),
            people=len(corpus.entities.people),
            quotes=len(corpus.entities.quotes),
            portfolio=corpus.portfolio.count() if corpus.portfolio else 0,
            team=len(corpus.team),
        )
        return corpus

    def get_provider_name(self) -> str:
        return "json"

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def _read_json(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as exc:
            raise CorpusLoadError(
                message=f"Corpus file not found: {path}",
                provider_name=self.get_provider_name(),
            ) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise CorpusLoadError(
                message=f"Could not read corpus file {path}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if not isinstance(document, dict):
            raise CorpusLoadError(
                message=f"Corpus file {path} must contain a JSON object",
                provider_name=self.get_provider_name(),
            )
        return document

    def _read_yaml(self, path: Path | None) -> Any:
        """Return the parsed listing, or None when the file is not there."""
        if path is None or not path.exists():
            logger.debug("listing_not_found", path=str(path) if path else None)
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise CorpusLoadError(
                message=f"Could not read listing {path}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
