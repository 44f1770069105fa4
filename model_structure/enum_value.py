"""Enum value - one allowed value of an enum."""
from typing import Any, Dict

from .element import Element
from .errors import ErrorKind
from .utils import note_value


class EnumValue(Element):
    ID_KIND = "enum_value"

    def __init__(self, data: Dict[str, Any], enum):
        super().__init__(enum.db_state, data.get("token"))
        if not data.get("name"):
            self.error("Enum value must have a name", ErrorKind.INVALID_ELEMENT)
        self.name: str = data["name"]
        self.note = note_value(data.get("note"))
        self.enum_id: int = enum.id

    @property
    def enum(self):
        return self.db_state.get("enum", self.enum_id)

    def export(self) -> Dict[str, Any]:
        return self.shallow_export()

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"enumId": self.enum_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"name": self.name, "note": self.note}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["enumValues"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_parent_ids(),
        }
