"""Ordered command registry.

The registry is a list, not a mapping: the first command whose
:meth:`~pwv_terminal.commands.base.BaseCommand.matches` accepts the input
wins.  Any command claiming a textual prefix of another command's alias
must therefore be registered *after* it.  ``fortune | cowsay`` belongs to
``cowsay``, so ``cowsay`` is registered before ``fortune`` (whose bare
alias would otherwise also claim the piped form).

In strict mode (the default) construction fails when a later command's
name or alias is already claimed by an earlier command, because that
alias could never be reached.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.models.terminal import CommandCategory
from pwv_terminal.utils.errors import ConfigurationError

logger = structlog.get_logger(logger_name=__name__)


class CommandRegistry:
    """First-match-wins lookup over an ordered list of commands."""

    def __init__(self, commands: Iterable[BaseCommand], strict: bool = True) -> None:
        self._commands: list[BaseCommand] = list(commands)
        if strict:
            self._check_reachability()
        logger.debug("command_registry_built", commands=len(self._commands), strict=strict)

    def _check_reachability(self) -> None:
        for position, command in enumerate(self._commands):
            for verb in [command.name, *command.aliases]:
                verb = verb.strip()
                for earlier in self._commands[:position]:
                    if earlier.matches(verb):
                        raise ConfigurationError(
                            message=(
                                f"Alias {verb!r} of command {command.name!r} is shadowed "
                                f"by earlier command {earlier.name!r}"
                            ),
                            provider_name="registry",
                        )

    def find(self, raw_input: str) -> BaseCommand | None:
        """Return the first registered command that matches, or None."""
        for command in self._commands:
            if command.matches(raw_input):
                return command
        return None

    def by_category(self) -> dict[CommandCategory, list[BaseCommand]]:
        """Commands grouped for help output, keeping registration order."""
        groups: dict[CommandCategory, list[BaseCommand]] = {
            category: [] for category in CommandCategory
        }
        for command in self._commands:
            groups[command.category].append(command)
        return groups

    def names(self) -> list[str]:
        return [command.name for command in self._commands]

    def set_box_width(self, width: int) -> None:
        for command in self._commands:
            command.set_box_width(width)

    def __iter__(self):
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
