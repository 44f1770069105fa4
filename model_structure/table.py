"""
Table - a named set of fields and indexes inside a schema.

Fields and indexes are built with the table; tags and the table group are
linked later, once those elements are accepted by the schema.
"""
from typing import Any, Dict, List, Optional

from .element import Element
from .errors import ErrorKind
from .field import Field
from .indexes import Index
from .utils import note_value, qualified_name


class Table(Element):
    ID_KIND = "table"

    def __init__(self, data: Dict[str, Any], schema):
        super().__init__(schema.db_state, data.get("token"))
        self.name: str = data.get("name")
        self.alias: Optional[str] = data.get("alias")
        self.note = note_value(data.get("note"))
        self.header_color: Optional[str] = data.get("headerColor")
        self.raw_tags: List[Dict[str, Any]] = list(data.get("tags") or [])
        self.schema_id: int = schema.id
        self.group_id: Optional[int] = None
        self.tag_ids: List[int] = []
        self.fields: List[Field] = []
        self.indexes: List[Index] = []

        self.process_fields(data.get("fields") or [])
        self.process_indexes(data.get("indexes") or [])

    @property
    def schema(self):
        return self.db_state.get("schema", self.schema_id)

    @property
    def group(self):
        return self.db_state.get("table_group", self.group_id)

    @property
    def tags(self) -> list:
        return self.db_state.resolve("tag", self.tag_ids)

    # Fields
    def process_fields(self, raw_fields: List[Dict[str, Any]]) -> None:
        for raw_field in raw_fields:
            self.push_field(Field(raw_field, self))

    def push_field(self, field: Field) -> None:
        self.check_field(field)
        self.fields.append(field)

    def check_field(self, field: Field) -> None:
        if any(f.name == field.name for f in self.fields):
            field.error(
                f'Field "{field.name}" existed in table {qualified_name(self.schema, self.name)}',
                ErrorKind.DUPLICATE_FIELD_NAME,
            )

    def find_field(self, field_name: str) -> Optional[Field]:
        return next((f for f in self.fields if f.name == field_name), None)

    # Indexes
    def process_indexes(self, raw_indexes: List[Dict[str, Any]]) -> None:
        for raw_index in raw_indexes:
            self.push_index(Index(raw_index, self))

    def push_index(self, index: Index) -> None:
        self.indexes.append(index)

    # Tags
    def push_tag(self, tag) -> None:
        """Link this table and the tag to each other."""
        if tag.id in self.tag_ids:
            return
        self.tag_ids.append(tag.id)
        tag.push_table(self)

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def export_child(self) -> Dict[str, Any]:
        return {
            "fields": [f.export() for f in self.fields],
            "indexes": [i.export() for i in self.indexes],
            "tags": [{"name": t.name} for t in self.tags],
        }

    def export_child_ids(self) -> Dict[str, Any]:
        return {
            "fieldIds": [f.id for f in self.fields],
            "indexIds": [i.id for i in self.indexes],
            "tagIds": list(self.tag_ids),
        }

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"schemaId": self.schema_id, "groupId": self.group_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "alias": self.alias,
            "note": self.note,
            "headerColor": self.header_color,
        }

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["tables"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
        for field in self.fields:
            field.normalize(model)
        for index in self.indexes:
            index.normalize(model)
