"""Turns columns into table rows."""

from __future__ import annotations

from dataclasses import dataclass, field

from modelhelper.models import Column


@dataclass
class ColumnTableRenderer:
    columns: list[Column] = field(default_factory=list)
    include_description: bool = False

    def rows(self) -> list[list[str]]:
        rows = []
        for column in self.columns:
            row = [
                column.name,
                column.db_type,
                "Yes" if column.is_nullable else "No",
                "Yes" if column.is_identity else "",
                "Yes" if column.is_primary_key else "",
                "Yes" if column.is_foreign_key else "",
            ]
            if self.include_description:
                row.append(column.description)
            rows.append(row)
        return rows

    def header(self) -> list[str]:
        header = ["Name", "Type", "Nullable", "Identity", "PK", "FK"]
        if self.include_description:
            header.append("Description")
        return header