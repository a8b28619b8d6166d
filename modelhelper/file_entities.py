"""Entities described in YAML documents and their conversion to the model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from modelhelper.models import Column, Entity, Relation, sort_columns_by_id


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _number(value: Any) -> int:
    return 0 if value is None else int(value)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"cannot unmarshal data: {what} must be a mapping")
    return value


@dataclass(frozen=True)
class ColumnReference:
    table: str = ""
    column: str = ""


@dataclass
class FileColumn:
    id: int = 0
    name: str = ""
    datatype: str = ""
    nullable: bool = False
    references: ColumnReference | None = None
    identity: bool = False
    is_primary: bool = False
    description: str = ""

    @classmethod
    def _from_mapping(cls, data: Any) -> FileColumn:
        values = _mapping(data, "column")
        reference = values.get("references")
        ref = None
        if reference is not None:
            ref_values = _mapping(reference, "references")
            ref = ColumnReference(
                table=_text(ref_values.get("table")),
                column=_text(ref_values.get("column")),
            )
        return cls(
            id=_number(values.get("id")),
            name=_text(values.get("name")),
            datatype=_text(values.get("type")),
            nullable=bool(values.get("nullable", False)),
            references=ref,
            identity=bool(values.get("identity", False)),
            is_primary=bool(values.get("primary", False)),
            description=_text(values.get("description")),
        )


@dataclass
class FileEntity:
    name: str = ""
    schema: str = ""
    description: str = ""
    rows: int = 0
    columns: dict[str, FileColumn] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> FileEntity:
        """Build an entity from a parsed YAML document; None gives an empty entity."""
        values = _mapping(data, "entity")
        columns = _mapping(values.get("columns"), "columns")
        return cls(
            name=_text(values.get("name")),
            schema=_text(values.get("schema")),
            description=_text(values.get("description")),
            rows=_number(values.get("rows")),
            columns={
                str(name): FileColumn._from_mapping(column)
                for name, column in columns.items()
            },
        )

    def to_source_entity(self) -> Entity:
        """Model entity of type "table" with columns ordered by id.

        A column without a positive id gets its position in the document.
        """
        columns = [
            Column(
                id=column.id if column.id > 0 else position,
                name=name,
                data_type=column.datatype,
                description=column.description,
                is_nullable=column.nullable,
                is_primary_key=column.is_primary,
                is_identity=column.identity,
                is_foreign_key=column.references is not None,
            )
            for position, (name, column) in enumerate(self.columns.items(), 1)
        ]
        return Entity(
            name=self.name,
            schema=self.schema,
            description=self.description,
            type="table",
            row_count=self.rows,
            columns=sort_columns_by_id(columns),
        )

    def parent_relations(self, entities: Iterable[FileEntity]) -> list[Relation]:
        """Relations to the entities this one's columns reference."""
        candidates = list(entities)
        relations = []
        for name, column in self.columns.items():
            reference = column.references
            if reference is None:
                continue
            for entity in candidates:
                if entity.name != reference.table:
                    continue
                related = entity.columns.get(reference.column)
                relations.append(
                    Relation(
                        schema=entity.schema,
                        column_name=reference.column,
                        column_nullable=related.nullable if related else False,
                        column_type=related.datatype if related else column.datatype,
                        name=reference.table,
                        owner_column_name=name,
                        owner_column_nullable=column.nullable,
                        owner_column_type=column.datatype,
                    )
                )
        return relations

    def child_relations(self, entities: Iterable[FileEntity]) -> list[Relation]:
        """Relations from other entities whose columns reference this one."""
        relations = []
        for entity in entities:
            if entity.name == self.name:
                continue
            for name, column in entity.columns.items():
                reference = column.references
                if reference is None or reference.table != self.name:
                    continue
                related = entity.columns.get(reference.column)
                relations.append(
                    Relation(
                        schema=entity.schema,
                        column_name=reference.column,
                        column_nullable=related.nullable if related else False,
                        column_type=related.datatype if related else column.datatype,
                        name=entity.name,
                        owner_column_name=name,
                        owner_column_nullable=column.nullable,
                        owner_column_type=column.datatype,
                    )
                )
        return relations


def entities_to_map(entities: Iterable[FileEntity]) -> dict[str, FileEntity]:
    """Index entities by name; a later entity replaces an earlier one."""
    return {entity.name: entity for entity in entities}