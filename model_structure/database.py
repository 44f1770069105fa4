"""
Database - root aggregate of the schema model.

Built once from the raw records produced by the schema parser:

    {
        "schemas": [...], "tables": [...], "enums": [...], "refs": [...],
        "tableGroups": [...], "tags": [...],
        "project": {"name": ..., "note": ..., "database_type": ...}
    }

Records without a "schemaName" go to the default schema. The first invalid
record raises SemanticError and no Database is returned.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from .config import DEFAULT_SCHEMA_NAME, DEFAULT_SCHEMA_NOTE, NORMALIZED_BUCKETS, EnumBinding
from .db_state import DbState
from .element import Element
from .enums import Enum
from .errors import ErrorKind
from .ref import Ref
from .schema import Schema
from .table import Table
from .table_group import TableGroup
from .tag import Tag
from .utils import note_value

logger = logging.getLogger(__name__)


class Database(Element):
    ID_KIND = "database"

    def __init__(self, data: Optional[Dict[str, Any]] = None,
                 enum_binding: EnumBinding = EnumBinding.ON_ENUM_INSERT):
        data = data or {}
        project = data.get("project") or {}
        super().__init__(DbState(), project.get("token"))
        self.enum_binding = EnumBinding(enum_binding)
        self.has_default_schema = False
        self.schemas: List[Schema] = []
        self.note = note_value(project.get("note"))
        self.database_type: Optional[str] = project.get("database_type")
        self.name: Optional[str] = project.get("name")

        # Later phases look up schemas, tables and tags by name: keep this order
        self.process_schemas(data.get("schemas") or [])
        self.process_tables(data.get("tables") or [])
        self.process_tags(data.get("tags") or [])
        self.process_refs(data.get("refs") or [])
        self.process_enums(data.get("enums") or [])
        self.process_table_groups(data.get("tableGroups") or [])

        if self.enum_binding == EnumBinding.AFTER_CONSTRUCTION:
            self.bind_enums()

    # ========================================================================
    # Schemas
    # ========================================================================

    def process_schemas(self, raw_schemas: List[Dict[str, Any]]) -> None:
        for raw_schema in raw_schemas:
            schema = Schema(raw_schema, self)
            self.push_schema(schema)
            if schema.name == DEFAULT_SCHEMA_NAME and _has_children(raw_schema):
                self.has_default_schema = True
            schema.process(raw_schema)
        logger.debug("Processed %d explicit schema(s)", len(raw_schemas))

    def push_schema(self, schema: Schema) -> None:
        self.check_schema(schema)
        self.schemas.append(schema)

    def check_schema(self, schema: Schema) -> None:
        if any(s.check_same_id(schema) for s in self.schemas):
            schema.error(f'Schema "{schema.name}" existed', ErrorKind.DUPLICATE_SCHEMA_NAME)

    def lookup_schema(self, schema_name: str) -> Optional[Schema]:
        """Find a schema by name or alias without creating it."""
        return next((s for s in self.schemas if s.has_name(schema_name)), None)

    def find_or_create_schema(self, schema_name: str) -> Schema:
        """Find a schema by name or alias, creating it on first mention.

        Raw records may name a schema that is never declared explicitly.
        """
        if schema_name == DEFAULT_SCHEMA_NAME:
            self.has_default_schema = True

        schema = self.lookup_schema(schema_name)
        if schema is None:
            schema = Schema({
                "name": schema_name,
                "note": DEFAULT_SCHEMA_NOTE if schema_name == DEFAULT_SCHEMA_NAME else None,
            }, self)
            self.push_schema(schema)
            logger.debug("Created schema %s on first reference", schema_name)
        return schema

    def _route(self, raw: Dict[str, Any]) -> Schema:
        return self.find_or_create_schema(raw.get("schemaName") or DEFAULT_SCHEMA_NAME)

    # ========================================================================
    # Top-level records
    # ========================================================================

    def process_tables(self, raw_tables: List[Dict[str, Any]]) -> None:
        for raw_table in raw_tables:
            schema = self._route(raw_table)
            schema.push_table(Table(raw_table, schema))
        logger.debug("Processed %d table(s)", len(raw_tables))

    def process_tags(self, raw_tags: List[Dict[str, Any]]) -> None:
        for raw_tag in raw_tags:
            schema = self._route(raw_tag)
            schema.push_tag(Tag(raw_tag, schema))
        logger.debug("Processed %d tag(s)", len(raw_tags))

        self.bind_tag_to_table()

    def bind_tag_to_table(self) -> None:
        """Attach every tag named by a table, creating tags not declared before."""
        for schema in self.schemas:
            for table in schema.tables:
                for raw_tag in table.raw_tags:
                    tag = schema.find_tag(raw_tag.get("name"))
                    if tag is None:
                        tag = Tag(raw_tag, schema)
                        schema.push_tag(tag)
                        logger.debug("Created tag %s.%s from table %s", schema.name, tag.name, table.name)
                    table.push_tag(tag)

    def process_refs(self, raw_refs: List[Dict[str, Any]]) -> None:
        for raw_ref in raw_refs:
            schema = self._route(raw_ref)
            schema.push_ref(Ref(raw_ref, schema))
        logger.debug("Processed %d ref(s)", len(raw_refs))

    def process_enums(self, raw_enums: List[Dict[str, Any]]) -> None:
        for raw_enum in raw_enums:
            schema = self._route(raw_enum)
            schema.push_enum(Enum(raw_enum, schema))
        logger.debug("Processed %d enum(s)", len(raw_enums))

    def process_table_groups(self, raw_table_groups: List[Dict[str, Any]]) -> None:
        for raw_table_group in raw_table_groups:
            schema = self._route(raw_table_group)
            schema.push_table_group(TableGroup(raw_table_group, schema))
        logger.debug("Processed %d table group(s)", len(raw_table_groups))

    def bind_enums(self) -> int:
        """Bind every enum to its fields once the whole database exists."""
        return sum(schema.bind_enum_to_field(enum)
                   for schema in self.schemas for enum in schema.enums)

    # ========================================================================
    # Lookup
    # ========================================================================

    def find_table(self, raw_table: Dict[str, Any], requester: Optional[Element] = None) -> Optional[Table]:
        """Find a table referenced by {"name", "schemaName"}.

        Unlike find_or_create_schema this never creates a schema: a missing
        schema means a dangling reference in records already processed.
        """
        schema_name = raw_table.get("schemaName") or DEFAULT_SCHEMA_NAME
        schema = self.lookup_schema(schema_name)
        if schema is None:
            (requester or self).error(f'Schema "{schema_name}" doesn\'t exist', ErrorKind.MISSING_SCHEMA)
        return schema.find_table(raw_table.get("name"))

    def get_element(self, kind: str, element_id: int):
        return self.db_state.get(kind, element_id)

    # ========================================================================
    # Export
    # ========================================================================

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def shallow_export(self) -> Dict[str, Any]:
        return {
            "hasDefaultSchema": self.has_default_schema,
            "note": self.note,
            "databaseType": self.database_type,
            "name": self.name,
        }

    def export_child(self) -> Dict[str, Any]:
        return {"schemas": [s.export() for s in self.schemas]}

    def export_child_ids(self) -> Dict[str, Any]:
        return {"schemaIds": [s.id for s in self.schemas]}

    def normalize(self) -> Dict[str, Dict[int, Any]]:
        model: Dict[str, Dict[int, Any]] = {bucket: {} for bucket in NORMALIZED_BUCKETS}
        model["database"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
        }
        for schema in self.schemas:
            schema.normalize(model)
        return model

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.export(), indent=indent)


def _has_children(raw_schema: Dict[str, Any]) -> bool:
    return any(raw_schema.get(key) for key in ("tables", "enums", "refs", "tags", "tableGroups"))
