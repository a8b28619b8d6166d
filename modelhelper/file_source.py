"""An entity source backed by a directory of YAML entity descriptions."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from modelhelper.casing import abbreviate
from modelhelper.file_entities import FileEntity
from modelhelper.models import Entity


def load_file_entities(directory: str | os.PathLike[str]) -> list[FileEntity]:
    """Read every file directly in ``directory``, in name order.

    An unreadable directory or file gives an empty list; a document that is
    not valid YAML raises ValueError.
    """
    root = Path(directory)
    try:
        paths = sorted(
            (path for path in root.iterdir() if not path.is_dir()),
            key=lambda path: path.name,
        )
    except OSError:
        return []

    entities = []
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            return []
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as error:
            raise ValueError(f"cannot unmarshal data: {error}") from error
        entities.append(FileEntity.from_mapping(data))
    return entities


class FileEntitySource:
    """Entities read afresh from a directory on every call."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)

    def _all(self) -> list[Entity]:
        base = load_file_entities(self.directory)
        result = []
        for file_entity in base:
            entity = file_entity.to_source_entity()
            entity.parent_relations = file_entity.parent_relations(base)
            entity.parent_relation_count = len(entity.parent_relations)
            entity.child_relations = file_entity.child_relations(base)
            entity.child_relation_count = len(entity.child_relations)
            entity.column_count = len(entity.columns)
            entity.alias = abbreviate(entity.name)
            result.append(entity)
        return result

    def entity(self, name: str) -> Entity | None:
        """The entity whose name matches ``name`` ignoring case, or None."""
        wanted = name.casefold()
        return next(
            (entity for entity in self._all() if entity.name.casefold() == wanted),
            None,
        )

    def entities(self, pattern: str = "") -> list[Entity]:
        """Every entity; the pattern is accepted but not applied."""
        return self._all()

    def entities_from_names(self, names: list[str]) -> list[Entity]:
        """Entities with exactly these names, in the order the names are given."""
        everything = self._all()
        return [entity for name in names for entity in everything if entity.name == name]

    def entities_from_column(self, column: str) -> list[Entity]:
        """Every entity; the column filter is accepted but not applied."""
        return self._all()