"""Abstract base class for terminal Command Objects.

Every verb the terminal understands is one :class:`BaseCommand` subclass.
A command declares its metadata (name, aliases, usage, help category) and
an :meth:`BaseCommand.execute` method that reads the shared
:class:`~pwv_terminal.models.corpus.Corpus` plus the parsed arguments and
returns a :class:`~pwv_terminal.models.terminal.CommandResult`.

Commands hold no session state.  The only way a command influences later
turns is by returning ``selectable_items`` in its result data, which the
query engine then installs as the active numbered list.

Alias grammar
-------------
``matches`` lower-cases and trims the input, then accepts it when it:

- equals ``name``;
- equals an alias exactly;
- starts with an alias followed by a space (``"cowsay hi"`` for ``cowsay``);
- for an alias written with a trailing space (``"list "``), starts with the
  trimmed alias followed by a space.

Because several commands claim textual prefixes of one another
(``fortune | cowsay`` vs ``fortune``), the registry order decides which one
wins; see :mod:`pwv_terminal.commands.registry`.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from pwv_terminal.models.corpus import Corpus
from pwv_terminal.models.terminal import CommandCategory, CommandResult


class BaseCommand(ABC):
    """Uniform capability every Command Object exposes to the registry."""

    def __init__(
        self,
        corpus: Corpus,
        box_width: int = 64,
        rng: random.Random | None = None,
    ) -> None:
        self._corpus = corpus
        self._box_width = box_width
        # Injected so tests can seed every random pick.
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical verb, e.g. ``"companies"``."""

    @property
    @abstractmethod
    def aliases(self) -> list[str]:
        """Alternative verbs or verb prefixes that also trigger the command."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description shown by ``help``."""

    @property
    @abstractmethod
    def usage(self) -> str:
        """Usage example shown by ``help``."""

    @property
    @abstractmethod
    def category(self) -> CommandCategory:
        """Help-text grouping."""

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    @abstractmethod
    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        """Run the command.

        Parameters
        ----------
        raw_input:
            The full, original-case input line.
        args:
            The whitespace-split input with the verb removed.

        Returns
        -------
        CommandResult
            Exactly one result; errors are returned, never raised, except
            :class:`~pwv_terminal.utils.errors.TerminalError` subclasses
            which the engine converts for us.
        """

    def matches(self, raw_input: str) -> bool:
        """Return True when *raw_input* selects this command."""
        command = raw_input.strip().lower()
        if command == self.name:
            return True
        for alias in self.aliases:
            if alias.endswith(" "):
                stem = alias.strip()
                if command == stem or command.startswith(stem + " "):
                    return True
            elif command == alias or command.startswith(alias + " "):
                return True
        return False

    def set_box_width(self, width: int) -> None:
        self._box_width = width

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
