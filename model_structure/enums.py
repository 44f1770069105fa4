"""Enum - a named list of values that fields may use as their type."""
from typing import Any, Dict, List

from .element import Element
from .enum_value import EnumValue
from .errors import ErrorKind
from .utils import note_value, qualified_name


class Enum(Element):
    """A named set of values that fields can use as their type."""
    ID_KIND = "enum"

    def __init__(self, data: Dict[str, Any], schema):
        super().__init__(schema.db_state, data.get("token"))
        if not data.get("name"):
            self.error("Enum must have a name", ErrorKind.INVALID_ELEMENT)
        self.name: str = data["name"]
        self.note = note_value(data.get("note"))
        self.schema_id: int = schema.id
        self.values: List[EnumValue] = []
        self.field_ids: List[int] = []

        self.process_values(data.get("values") or [])

    @property
    def schema(self):
        return self.db_state.get("schema", self.schema_id)

    @property
    def fields(self) -> list:
        return self.db_state.resolve("field", self.field_ids)

    def process_values(self, raw_values: List[Dict[str, Any]]) -> None:
        for raw_value in raw_values:
            self.push_value(EnumValue(raw_value, self))

    def push_value(self, value: EnumValue) -> None:
        self.check_value(value)
        self.values.append(value)

    def check_value(self, value: EnumValue) -> None:
        if any(v.name == value.name for v in self.values):
            value.error(
                f'Enum value "{value.name}" existed in enum {qualified_name(self.schema, self.name)}',
                ErrorKind.DUPLICATE_ENUM_VALUE,
            )

    def push_field(self, field) -> None:
        if field.id not in self.field_ids:
            self.field_ids.append(field.id)

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def export_child(self) -> Dict[str, Any]:
        return {"values": [v.export() for v in self.values]}

    def export_child_ids(self) -> Dict[str, Any]:
        return {
            "valueIds": [v.id for v in self.values],
            "fieldIds": list(self.field_ids),
        }

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"schemaId": self.schema_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"name": self.name, "note": self.note}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["enums"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
        for value in self.values:
            value.normalize(model)
