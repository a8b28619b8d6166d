"""Rendering entity lists as table rows and relations as trees."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from modelhelper.models import Entity
from modelhelper.tree import Node

_DARK_GRAY = "\x1b[90m"
_RESET = "\x1b[0m"


@dataclass
class RelationTreeItem:
    key_name: str = ""
    parent_id: int = 0
    id: int = 0
    related_table: str = ""
    related_column_name: str = ""
    table_name: str = ""
    column_name: str = ""


@dataclass
class RelationTreeBuilder:
    items: list[RelationTreeItem] = field(default_factory=list)

    def build(self) -> Node:
        """Tree rooted at the leading item whose parent id is -1."""
        root = Node()
        for item in self.items:
            if item.parent_id != -1:
                break
            root = Node(name=item.table_name, id=item.id)
            _add_child_nodes(root, self.items)
        return root


def _add_child_nodes(node: Node, items: list[RelationTreeItem]) -> None:
    for item in items:
        if item.parent_id == node.id:
            description = (
                f"{_DARK_GRAY}connection: ({item.table_name}.{item.column_name} => "
                f"{item.related_table}.{item.related_column_name}){_RESET}"
            )
            child = Node(name=item.table_name, description=description, id=item.id)
            _add_child_nodes(child, items)
            node.add(child)


def sort_entities_by_name(
    entities: Iterable[Entity], descending: bool = False
) -> list[Entity]:
    return sorted(entities, key=lambda entity: entity.name, reverse=descending)


def sort_entities_by_rows(
    entities: Iterable[Entity], descending: bool = False
) -> list[Entity]:
    return sorted(entities, key=lambda entity: entity.row_count, reverse=descending)


def to_rows(
    entities: Iterable[Entity], with_description: bool, with_statistics: bool
) -> list[list[str]]:
    rows = []
    for entity in entities:
        row = [entity.name, entity.schema]
        if not with_description:
            row += [entity.type, entity.alias, f"{entity.row_count:,}"]
        if with_statistics:
            row += [
                f"{entity.column_count:,}",
                f"{entity.parent_relation_count:,}",
                f"{entity.child_relation_count:,}",
            ]
        if with_description:
            row.append(entity.description)
        rows.append(row)
    return rows


def build_header(with_description: bool, with_statistics: bool) -> list[str]:
    header = ["Name", "Schema"]
    if not with_description:
        header += ["Type", "Alias", "Rows"]
    if with_statistics:
        header += ["Col Cnt", "P Relations", "C Relations"]
    if with_description:
        header.append("Description")
    return header


@dataclass
class DefaultEntitiesTableRenderer:
    entities: list[Entity] = field(default_factory=list)

    def rows(self) -> list[list[str]]:
        return to_rows(self.entities, False, True)

    def header(self) -> list[str]:
        return build_header(False, True)


@dataclass
class DescriptiveEntitiesRenderer:
    entities: list[Entity] = field(default_factory=list)

    def rows(self) -> list[list[str]]:
        return to_rows(self.entities, True, False)

    def header(self) -> list[str]:
        return build_header(True, False)


@dataclass
class SimpleEntitiesRenderer:
    entities: list[Entity] = field(default_factory=list)

    def rows(self) -> list[list[str]]:
        return to_rows(self.entities, False, False)

    def header(self) -> list[str]:
        return build_header(False, False)