"""
Model Core - Shared logic for the schema model tools

This module contains the components shared by main.py (CLI) and model_repl.py (REPL):
- load_bundle(): Read a raw bundle produced by the schema parser
- build_database(): Build the validated Database model
- summarize(): Count entities per schema
- dump_export() / dump_normalized(): JSON text of both model views
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from config import JSON_INDENT
from model_structure import Database, EnumBinding

logger = logging.getLogger(__name__)

BUNDLE_KEYS = ("schemas", "tables", "enums", "refs", "tableGroups", "tags", "project")


def load_bundle(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a raw bundle from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        The raw bundle with every collection present
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Bundle must be a JSON object, got {type(data).__name__}")

    unknown = set(data) - set(BUNDLE_KEYS)
    if unknown:
        logger.warning("Ignoring unknown bundle keys: %s", ", ".join(sorted(unknown)))

    bundle = {key: data.get(key) or [] for key in BUNDLE_KEYS if key != "project"}
    bundle["project"] = data.get("project") or {}
    logger.info("Loaded bundle %s (%d tables, %d refs)", path, len(bundle["tables"]), len(bundle["refs"]))
    return bundle


def build_database(bundle: Dict[str, Any],
                   enum_binding: EnumBinding = EnumBinding.ON_ENUM_INSERT) -> Database:
    """Build the model; SemanticError propagates to the caller."""
    database = Database(bundle, enum_binding=enum_binding)
    logger.info("Built database %s with %d schema(s)", database.name or "<unnamed>", len(database.schemas))
    return database


def summarize(database: Database) -> Dict[str, Any]:
    """
    Count the entities of every schema.

    Returns:
        {"name": ..., "databaseType": ..., "schemas": {schema_name: {kind: count}}, "totals": {...}}
    """
    schemas = {}
    totals = {"tables": 0, "fields": 0, "enums": 0, "refs": 0, "tags": 0, "tableGroups": 0}
    for schema in database.schemas:
        counts = {
            "tables": len(schema.tables),
            "fields": sum(len(t.fields) for t in schema.tables),
            "enums": len(schema.enums),
            "refs": len(schema.refs),
            "tags": len(schema.tags),
            "tableGroups": len(schema.table_groups),
        }
        schemas[schema.name] = counts
        for kind, count in counts.items():
            totals[kind] += count

    return {
        "name": database.name,
        "databaseType": database.database_type,
        "hasDefaultSchema": database.has_default_schema,
        "schemas": schemas,
        "totals": totals,
    }


def dump_export(database: Database) -> str:
    return json.dumps(database.export(), indent=JSON_INDENT)


def dump_normalized(database: Database) -> str:
    return json.dumps(database.normalize(), indent=JSON_INDENT)
