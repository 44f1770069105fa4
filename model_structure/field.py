"""Field - one column of a table, with its type and constraints."""
from typing import Any, Dict, List, Optional

from .element import Element
from .errors import ErrorKind
from .utils import note_value


class Field(Element):
    ID_KIND = "field"

    def __init__(self, data: Dict[str, Any], table):
        super().__init__(table.db_state, data.get("token"))
        if not data.get("name"):
            self.error("Field must have a name", ErrorKind.INVALID_ELEMENT)
        if not data.get("type"):
            self.error("Field must have a type", ErrorKind.INVALID_ELEMENT)
        self.name: str = data["name"]
        self.type: Dict[str, Any] = data["type"]
        self.unique = data.get("unique")
        self.pk = data.get("pk")
        self.not_null = data.get("not_null")
        self.note = note_value(data.get("note"))
        self.dbdefault = data.get("dbdefault")
        self.increment = data.get("increment")
        self.table_id: int = table.id
        self.enum_id: Optional[int] = None
        self.endpoint_ids: List[int] = []

    @property
    def table(self):
        return self.db_state.get("table", self.table_id)

    @property
    def enum(self):
        return self.db_state.get("enum", self.enum_id)

    @property
    def endpoints(self) -> list:
        return self.db_state.resolve("endpoint", self.endpoint_ids)

    @property
    def type_name(self) -> Optional[str]:
        return self.type.get("type_name")

    @property
    def type_schema_name(self) -> Optional[str]:
        return self.type.get("schemaName")

    def push_endpoint(self, endpoint) -> None:
        self.endpoint_ids.append(endpoint.id)

    def export(self) -> Dict[str, Any]:
        return self.shallow_export()

    def export_child_ids(self) -> Dict[str, Any]:
        return {"endpointIds": list(self.endpoint_ids)}

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"tableId": self.table_id, "enumId": self.enum_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "unique": self.unique,
            "pk": self.pk,
            "not_null": self.not_null,
            "note": self.note,
            "dbdefault": self.dbdefault,
            "increment": self.increment,
        }

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["fields"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
