"""Naming helpers for error messages and exports."""
from typing import Any, Optional

from .config import DEFAULT_SCHEMA_NAME


def should_print_schema(schema) -> bool:
    """Whether messages should qualify names with the schema name."""
    return schema.name != DEFAULT_SCHEMA_NAME


def qualified_name(schema, name: str) -> str:
    if should_print_schema(schema):
        return f'"{schema.name}"."{name}"'
    return f'"{name}"'


def note_value(note: Any) -> Optional[str]:
    """Notes arrive either as plain text or as {"value": ..., "token": ...}."""
    if isinstance(note, dict):
        return note.get("value")
    return note


def raw_table_name(schema_name: Optional[str], table_name: str) -> str:
    """Quote a table reference as written in a raw record."""
    if schema_name and schema_name != DEFAULT_SCHEMA_NAME:
        return f'"{schema_name}"."{table_name}"'
    return f'"{table_name}"'
