"""List commands for the four entity aggregates.

``companies``, ``investors``, ``people`` and ``topics`` share one shape:
names sorted alphabetically, numbered, and published as the selectable
list so that typing ``3`` opens the third entity's profile.
"""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.box_builder import build_box, divider, header, list_section, text
from pwv_terminal.commands.helpers.text import number
from pwv_terminal.models.corpus import EntityAggregate, EntityKind
from pwv_terminal.models.terminal import (
    CommandCategory,
    CommandResult,
    ItemKind,
    ItemType,
    ResultType,
    SelectableItem,
)

VIEW_DETAILS_HINT = 'Type a number to view details (e.g., "1")'


class EntityListCommand(BaseCommand):
    """Shared behaviour of the entity list verbs."""

    kind: EntityKind
    title: str
    summary: str

    @property
    def name(self) -> str:
        return self.kind.list_verb

    @property
    def aliases(self) -> list[str]:
        return [self.kind.list_verb, f"list {self.kind.list_verb}"]

    @property
    def description(self) -> str:
        return self.summary

    @property
    def usage(self) -> str:
        return self.kind.list_verb

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.LIST

    def format_line(self, position: int, name: str, aggregate: EntityAggregate) -> str:
        return f"{number(position)}. {name} ({aggregate.post_count} mentions)"

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        entities = self._corpus.entity_map(self.kind)
        names = sorted(entities)

        output = build_box([
            header(self.title),
            list_section(
                self.format_line(i, name, entities[name]) for i, name in enumerate(names)
            ),
            divider(),
            text(VIEW_DETAILS_HINT),
        ])

        item_type = ItemType(self.kind.value)
        selectable_items = [
            SelectableItem(
                id=name,
                label=name,
                type=item_type,
                kind=ItemKind(self.kind.value),
                data=entities[name],
            )
            for name in names
        ]
        return CommandResult(
            type=ResultType.LIST,
            content=output,
            data={"selectable_items": selectable_items},
        )


class CompaniesCommand(EntityListCommand):
    kind = EntityKind.COMPANY
    title = "ALL COMPANIES"
    summary = "List all companies"


class InvestorsCommand(EntityListCommand):
    kind = EntityKind.INVESTOR
    title = "ALL INVESTORS"
    summary = "List all investors/VCs"


class PeopleCommand(EntityListCommand):
    kind = EntityKind.PERSON
    title = "ALL PEOPLE"
    summary = "List all people"

    def format_line(self, position: int, name: str, aggregate: EntityAggregate) -> str:
        return f"{number(position)}. {name} - {aggregate.role or 'Unknown'}"


class TopicsCommand(EntityListCommand):
    kind = EntityKind.TOPIC
    title = "ALL TOPICS"
    summary = "List all topics"

    def format_line(self, position: int, name: str, aggregate: EntityAggregate) -> str:
        return f"{number(position)}. {name} ({aggregate.post_count} posts)"
