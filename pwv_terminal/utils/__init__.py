"""Utility modules for the PWV discovery terminal.

- **errors** -- Domain-specific exception hierarchy rooted at TerminalError;
  the query engine converts any of these into an error result.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Domain exception hierarchy --------------------------------------------
from pwv_terminal.utils.errors import (
    CommandUsageError,
    ConfigurationError,
    CorpusLoadError,
    EntityExtractionError,
    EntityNotFoundError,
    LLMError,
    SelectionError,
    TerminalError,
)

# -- Structured logging setup ----------------------------------------------
from pwv_terminal.utils.logging import configure_logging, get_logger

__all__ = [
    "CommandUsageError",
    "ConfigurationError",
    "CorpusLoadError",
    "EntityExtractionError",
    "EntityNotFoundError",
    "LLMError",
    "SelectionError",
    "TerminalError",
    "configure_logging",
    "get_logger",
]
