"""Custom exception hierarchy for the PWV discovery terminal.

All application exceptions inherit from :class:`TerminalError`, which
carries an optional ``provider_name`` so log lines can identify which
collaborator (e.g. "openai", "fal", "corpus") caused the failure.

The hierarchy is organized by subsystem:

    TerminalError  (base -- catch-all for any terminal error)
    +-- CorpusLoadError          (corpus / portfolio / team file loading)
    +-- EntityNotFoundError      (case-insensitive name lookup failed)
    +-- CommandUsageError        (malformed argument string for a verb)
    +-- SelectionError           (numeric selection against the active list)
    +-- ConfigurationError       (startup / registry / missing config)
    +-- LLMError                 (any LLM API call failure, offline producer)
    +-- EntityExtractionError    (LLM output could not be parsed into a post)

Inside the query engine every :class:`TerminalError` is converted into a
``type='error'`` :class:`~pwv_terminal.models.terminal.CommandResult` whose
content is the exception's ``message``.  Nothing raised here is fatal to
an interactive session.
"""

from __future__ import annotations


class TerminalError(Exception):
    """Base exception for all terminal errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which collaborator triggered the error.
    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[fal] FAL API error 500``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Corpus errors
# ---------------------------------------------------------------------------

class CorpusLoadError(TerminalError):
    """Raised when the entity corpus or a static listing cannot be loaded."""

    def __init__(
        self,
        message: str = "Failed to load corpus data",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class EntityNotFoundError(TerminalError):
    """Raised when a case-insensitive entity lookup finds no canonical key.

    ``kind`` is the entity family that was searched (``"company"``,
    ``"investor"``, ``"person"``, ``"topic"``) and ``name`` the value the
    user typed.  The default message names both and points at the list
    verb for that family.
    """

    _LIST_VERBS = {
        "company": "companies",
        "investor": "investors",
        "person": "people",
        "topic": "topics",
    }

    def __init__(
        self,
        kind: str,
        name: str,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self._kind = kind
        self._name = name
        if message is None:
            verb = self._LIST_VERBS.get(kind, "help")
            message = (
                f'{kind.capitalize()} "{name}" not found.\n'
                f"Try '{verb}' to see all {verb}."
            )
        super().__init__(message=message, provider_name=provider_name)

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def name(self) -> str:
        return self._name


# ---------------------------------------------------------------------------
# Dispatch errors
# ---------------------------------------------------------------------------

class CommandUsageError(TerminalError):
    """Raised when a verb is recognised but its arguments are malformed."""

    def __init__(
        self,
        message: str = "Invalid command arguments",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class SelectionError(TerminalError):
    """Raised when numeric selection cannot resolve against the active list.

    Covers the empty-list case, out-of-range indices and item kinds that
    have no selection handler.
    """

    def __init__(
        self,
        message: str = "Invalid selection",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(TerminalError):
    """Raised for invalid settings or an inconsistent command registry.

    The registry raises this at construction time when an alias can never
    be reached because an earlier command already claims it.
    """

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Offline producer errors
# ---------------------------------------------------------------------------

class LLMError(TerminalError):
    """Raised when an LLM API call fails or returns an empty response."""

    def __init__(
        self,
        message: str = "LLM API call failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class EntityExtractionError(TerminalError):
    """Raised when LLM output cannot be parsed into a post record."""

    def __init__(
        self,
        message: str = "Entity extraction failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
