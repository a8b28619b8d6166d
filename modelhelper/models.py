"""Data model describing database entities, their columns and relations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Column:
    id: int = 0
    name: str = ""
    description: str = ""
    data_type: str = ""
    db_type: str = ""
    is_nullable: bool = False
    is_identity: bool = False
    is_primary_key: bool = False
    is_foreign_key: bool = False
    is_reserved: bool = False
    collation: str = ""
    length: int = 0
    use_length: bool = False
    precision: int = 0
    scale: int = 0
    use_precision: bool = False
    references_column: str = ""
    references_table: str = ""
    column_index: int = 0
    for_create: str = ""


@dataclass
class Relation:
    name: str = ""
    schema: str = ""
    type: str = ""
    column_name: str = ""
    column_type: str = ""
    column_nullable: bool = False
    owner_column_name: str = ""
    owner_column_type: str = ""
    owner_column_nullable: bool = False
    constraint_name: str = ""
    is_self_join: bool = False
    group_index: int = 0
    has_synonym: bool = False
    synonym: str = ""
    columns: list[Column] = field(default_factory=list)


@dataclass
class Entity:
    name: str = ""
    schema: str = ""
    type: str = ""
    alias: str = ""
    description: str = ""
    row_count: int = 0
    column_count: int = 0
    nullable_column_count: int = 0
    identity_column_count: int = 0
    parent_relation_count: int = 0
    child_relation_count: int = 0
    is_versioned: bool = False
    is_history: bool = False
    history_table: str = ""
    has_synonym: bool = False
    synonym: str = ""
    columns: list[Column] = field(default_factory=list)
    parent_relations: list[Relation] = field(default_factory=list)
    child_relations: list[Relation] = field(default_factory=list)
    indexes: list[Any] = field(default_factory=list)


def sort_columns_by_id(columns: Iterable[Column]) -> list[Column]:
    """Return the columns ordered by ascending id."""
    return sorted(columns, key=lambda column: column.id)


def sort_columns_by_name(columns: Iterable[Column]) -> list[Column]:
    """Return the columns ordered by name."""
    return sorted(columns, key=lambda column: column.name)