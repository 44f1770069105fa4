"""
Schema - a named namespace of tables, enums, refs, tags and table groups.
"""
import logging
from typing import Any, Dict, List, Optional

from .config import DEFAULT_SCHEMA_NAME, EnumBinding
from .element import Element
from .enums import Enum
from .errors import ErrorKind
from .ref import Ref
from .table import Table
from .table_group import TableGroup
from .tag import Tag
from .utils import note_value, qualified_name

logger = logging.getLogger(__name__)


class Schema(Element):
    ID_KIND = "schema"

    def __init__(self, data: Dict[str, Any], database):
        super().__init__(database.db_state, data.get("token"))
        self.name: str = data.get("name")
        self.alias: Optional[str] = data.get("alias")
        self.note = note_value(data.get("note"))
        self.database_id: int = database.id
        self.tables: List[Table] = []
        self.enums: List[Enum] = []
        self.refs: List[Ref] = []
        self.tags: List[Tag] = []
        self.table_groups: List[TableGroup] = []

    @property
    def database(self):
        return self.db_state.get("database", self.database_id)

    def has_name(self, name: Optional[str]) -> bool:
        return name is not None and (name == self.name or name == self.alias)

    def process(self, data: Dict[str, Any]) -> None:
        """Build the nested collections of a raw schema record.

        Order matters: enum binding needs the tables, refs and groups need
        the tables of this schema.
        """
        self.process_tables(data.get("tables") or [])
        self.process_tags(data.get("tags") or [])
        self.process_enums(data.get("enums") or [])
        self.process_refs(data.get("refs") or [])
        self.process_table_groups(data.get("tableGroups") or [])

    # ========================================================================
    # Tables
    # ========================================================================

    def process_tables(self, raw_tables: List[Dict[str, Any]]) -> None:
        for raw_table in raw_tables:
            self.push_table(Table(raw_table, self))

    def push_table(self, table: Table) -> None:
        self.check_table(table)
        self.tables.append(table)

    def check_table(self, table: Table) -> None:
        if any(t.name == table.name for t in self.tables):
            table.error(f"Table {qualified_name(self, table.name)} existed", ErrorKind.DUPLICATE_TABLE_NAME)

    def find_table(self, table_name: str) -> Optional[Table]:
        return next((t for t in self.tables if t.name == table_name or t.alias == table_name), None)

    # ========================================================================
    # Enums
    # ========================================================================

    def process_enums(self, raw_enums: List[Dict[str, Any]]) -> None:
        for raw_enum in raw_enums:
            self.push_enum(Enum(raw_enum, self))

    def push_enum(self, enum: Enum) -> None:
        self.check_enum(enum)
        self.enums.append(enum)
        if self.database.enum_binding == EnumBinding.ON_ENUM_INSERT:
            self.bind_enum_to_field(enum)

    def check_enum(self, enum: Enum) -> None:
        if any(e.name == enum.name for e in self.enums):
            enum.error(f"Enum {qualified_name(self, enum.name)} existed", ErrorKind.DUPLICATE_ENUM_NAME)

    def find_enum(self, enum_name: str) -> Optional[Enum]:
        return next((e for e in self.enums if e.name == enum_name), None)

    def bind_enum_to_field(self, enum: Enum) -> int:
        """Link the enum with every field of the database typed by it.

        A field's type may name an enum of another schema, so all schemas are
        scanned. Returns the number of fields newly bound.
        """
        bound = 0
        for schema in self.database.schemas:
            for table in schema.tables:
                for field in table.fields:
                    if field.enum_id is not None or field.type_name != enum.name:
                        continue
                    if not self.has_name(field.type_schema_name or DEFAULT_SCHEMA_NAME):
                        continue
                    field.enum_id = enum.id
                    enum.push_field(field)
                    bound += 1
        if bound:
            logger.debug("Bound enum %s.%s to %d field(s)", self.name, enum.name, bound)
        return bound

    # ========================================================================
    # Tags
    # ========================================================================

    def process_tags(self, raw_tags: List[Dict[str, Any]]) -> None:
        for raw_tag in raw_tags:
            self.push_tag(Tag(raw_tag, self))

    def push_tag(self, tag: Tag) -> None:
        self.check_tag(tag)
        self.tags.append(tag)

    def check_tag(self, tag: Tag) -> None:
        if any(t.name == tag.name for t in self.tags):
            tag.error(f"Tag {qualified_name(self, tag.name)} has already existed", ErrorKind.DUPLICATE_TAG_NAME)

    def find_tag(self, tag_name: str) -> Optional[Tag]:
        return next((t for t in self.tags if t.name == tag_name), None)

    # ========================================================================
    # Refs
    # ========================================================================

    def process_refs(self, raw_refs: List[Dict[str, Any]]) -> None:
        for raw_ref in raw_refs:
            self.push_ref(Ref(raw_ref, self))

    def push_ref(self, ref: Ref) -> None:
        self.check_ref(ref)
        self.refs.append(ref)
        ref.link_endpoints()

    def check_ref(self, ref: Ref) -> None:
        if any(r.equals(ref) for r in self.refs):
            ref.error("Reference with same endpoints duplicated", ErrorKind.DUPLICATE_REF)

    # ========================================================================
    # Table groups
    # ========================================================================

    def process_table_groups(self, raw_table_groups: List[Dict[str, Any]]) -> None:
        for raw_table_group in raw_table_groups:
            self.push_table_group(TableGroup(raw_table_group, self))

    def push_table_group(self, table_group: TableGroup) -> None:
        self.check_table_group(table_group)
        self.table_groups.append(table_group)
        table_group.link_tables()

    def check_table_group(self, table_group: TableGroup) -> None:
        if any(tg.name == table_group.name for tg in self.table_groups):
            table_group.error(
                f"Table Group {qualified_name(self, table_group.name)} existed",
                ErrorKind.DUPLICATE_TABLE_GROUP_NAME,
            )

    def check_same_id(self, other: "Schema") -> bool:
        """Whether two schemas denote the same namespace, by name or alias."""
        return (self.name == other.name
                or (self.alias is not None and self.alias == other.name)
                or (other.alias is not None and self.name == other.alias)
                or (self.alias is not None and self.alias == other.alias))

    # ========================================================================
    # Export
    # ========================================================================

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def export_child(self) -> Dict[str, Any]:
        return {
            "tables": [t.export() for t in self.tables],
            "enums": [e.export() for e in self.enums],
            "tableGroups": [tg.export() for tg in self.table_groups],
            "refs": [r.export() for r in self.refs],
            "tags": [t.export() for t in self.tags],
        }

    def export_child_ids(self) -> Dict[str, Any]:
        return {
            "tableIds": [t.id for t in self.tables],
            "enumIds": [e.id for e in self.enums],
            "tableGroupIds": [tg.id for tg in self.table_groups],
            "refIds": [r.id for r in self.refs],
            "tagIds": [t.id for t in self.tags],
        }

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"databaseId": self.database_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"name": self.name, "note": self.note, "alias": self.alias}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["schemas"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
        for table in self.tables:
            table.normalize(model)
        for enum in self.enums:
            enum.normalize(model)
        for table_group in self.table_groups:
            table_group.normalize(model)
        for ref in self.refs:
            ref.normalize(model)
        for tag in self.tags:
            tag.normalize(model)
