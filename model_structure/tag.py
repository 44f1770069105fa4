"""Tag - a label shared by the tables of a schema."""
from typing import Any, Dict, List, Optional

from .element import Element
from .utils import note_value


class Tag(Element):
    ID_KIND = "tag"

    def __init__(self, data: Dict[str, Any], schema):
        super().__init__(schema.db_state, data.get("token"))
        self.name: str = data.get("name")
        self.note = note_value(data.get("note"))
        self.color: Optional[str] = data.get("color")
        self.schema_id: int = schema.id
        self.table_ids: List[int] = []

    @property
    def schema(self):
        return self.db_state.get("schema", self.schema_id)

    @property
    def tables(self) -> list:
        return self.db_state.resolve("table", self.table_ids)

    def push_table(self, table) -> None:
        if table.id not in self.table_ids:
            self.table_ids.append(table.id)

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def export_child(self) -> Dict[str, Any]:
        return {
            "tables": [{"tableName": t.name, "schemaName": t.schema.name} for t in self.tables],
        }

    def export_child_ids(self) -> Dict[str, Any]:
        return {"tableIds": list(self.table_ids)}

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"schemaId": self.schema_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"name": self.name, "note": self.note, "color": self.color}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["tags"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
