"""``stats`` and ``surprise``: corpus-wide exploration commands.

Both render through :class:`~pwv_terminal.services.profiles.ProfileRenderer`
so their output matches what numeric selection and ``showcase`` produce.
"""

from __future__ import annotations

import random

import structlog

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.models.corpus import Corpus, EntityKind
from pwv_terminal.models.terminal import CommandCategory, CommandResult
from pwv_terminal.services.profiles import ProfileRenderer

logger = structlog.get_logger(logger_name=__name__)

SURPRISES = ("company", "person", "connection", "stats")


class RendererCommand(BaseCommand):
    """A command that owns a :class:`ProfileRenderer` over its corpus."""

    def __init__(
        self,
        corpus: Corpus,
        box_width: int = 64,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(corpus, box_width, rng)
        self._renderer = ProfileRenderer(corpus, box_width, self._rng)

    def set_box_width(self, width: int) -> None:
        super().set_box_width(width)
        self._renderer.set_box_width(width)

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.EXPLORATION


class StatsCommand(RendererCommand):
    @property
    def name(self) -> str:
        return "stats"

    @property
    def aliases(self) -> list[str]:
        return ["stats"]

    @property
    def description(self) -> str:
        return "Fun statistics about the corpus"

    @property
    def usage(self) -> str:
        return "stats"

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        return self._renderer.stats()


class SurpriseCommand(RendererCommand):
    """A random company, person, connection or the stats view.

    Whenever the corpus cannot supply the chosen surprise (no companies,
    fewer than two names to connect) it falls back to ``showcase random``.
    """

    @property
    def name(self) -> str:
        return "surprise"

    @property
    def aliases(self) -> list[str]:
        return ["surprise", "surprise me"]

    @property
    def description(self) -> str:
        return "Random combination of entities"

    @property
    def usage(self) -> str:
        return "surprise me"

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        surprise = self._rng.choice(SURPRISES)
        logger.debug("surprise_selected", surprise=surprise)

        if surprise == "stats":
            return self._renderer.stats()

        if surprise in ("company", "person"):
            kind = EntityKind.COMPANY if surprise == "company" else EntityKind.PERSON
            if not self._corpus.entity_map(kind):
                return self._renderer.random_showcase()
            return self._renderer.random_entity(kind)

        # dict.fromkeys keeps first-seen order while dropping names shared
        # by a company and a person.
        names = list(dict.fromkeys([
            *self._corpus.entities.companies,
            *self._corpus.entities.people,
        ]))
        if len(names) < 2:
            return self._renderer.random_showcase()
        first, second = self._rng.sample(names, 2)
        return self._renderer.connections(f"{first} and {second}")
