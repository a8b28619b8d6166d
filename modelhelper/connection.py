"""Connection strings and errors shared by entity sources."""

from __future__ import annotations

_VALID_CONNECTION_TYPES = {
    "mssql": "Connects to a Microsoft SQL Server",
}


class EntityNotFoundError(LookupError):
    """Raised when a source has no entity with the requested name."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        super().__init__(f"Entity '{name}' not found")


def build_connection_string(
    db_type: str, server: str, database: str, username: str, password: str
) -> str:
    """URL-style connection string; only SQL Server is supported, others give ""."""
    if db_type == "mssql":
        return f"sqlserver://{username}:{password}@{server}?database={database}"
    return ""


def split_connection_string(connection_string: str) -> dict[str, str]:
    """Split ``key=value;key=value`` into a dict with lower-cased keys.

    A part that does not hold exactly one '=' keeps its key with an empty value.
    """
    items: dict[str, str] = {}
    if not connection_string:
        return items
    for part in connection_string.split(";"):
        key, *rest = part.split("=")
        items[key.lower()] = rest[0] if len(rest) == 1 else ""
    return items


def is_connection_type_valid(connection_type: str) -> bool:
    return connection_type.lower() in _VALID_CONNECTION_TYPES