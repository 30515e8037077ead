"""Abstract base class for corpus sources.

A corpus provider produces the immutable :class:`Corpus` that the query
engine and every command read from.  The only concrete source today is the
aggregated JSON file plus the YAML portfolio/team listings, but tests and
alternative deployments can supply their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pwv_terminal.models.corpus import Corpus


# Concrete implementation: JsonCorpusProvider
# Located in: pwv_terminal/providers/corpus/
class ICorpusProvider(ABC):
    """Contract for loading the entity corpus once at session start."""

    @abstractmethod
    def load(self) -> Corpus:
        """Load and validate the whole corpus.

        Returns
        -------
        Corpus
            The fully validated corpus, including the portfolio and team
            listings when they are available.

        Raises
        ------
        pwv_terminal.utils.errors.CorpusLoadError
            If the corpus document is missing, unreadable or invalid.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in log lines (e.g. ``"json"``)."""
