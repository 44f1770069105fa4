"""
Table group - a named set of tables; a table belongs to at most one group.
"""
from typing import Any, Dict, List, Optional

from .element import Element
from .errors import ErrorKind
from .utils import note_value, qualified_name, raw_table_name


class TableGroup(Element):
    ID_KIND = "table_group"

    def __init__(self, data: Dict[str, Any], schema):
        super().__init__(schema.db_state, data.get("token"))
        self.name: str = data.get("name")
        self.note = note_value(data.get("note"))
        self.color: Optional[str] = data.get("color")
        self.schema_id: int = schema.id
        self.table_ids: List[int] = []

        self.process_tables(data.get("tables") or [])

    @property
    def schema(self):
        return self.db_state.get("schema", self.schema_id)

    @property
    def tables(self) -> list:
        return self.db_state.resolve("table", self.table_ids)

    def process_tables(self, raw_tables: List[Dict[str, Any]]) -> None:
        database = self.schema.database
        for raw_table in raw_tables:
            table = database.find_table(raw_table, requester=self)
            if not table:
                self.error(
                    f"Table {raw_table_name(raw_table.get('schemaName'), raw_table.get('name'))} doesn't exist",
                    ErrorKind.MISSING_TABLE,
                )
            self.check_table(table)
            self.push_table(table)

    def check_table(self, table) -> None:
        name = qualified_name(table.schema, table.name)
        if table.id in self.table_ids:
            self.error(f"Table {name} is already in the group", ErrorKind.TABLE_GROUP_CONFLICT)
        if table.group_id is not None:
            self.error(f'Table {name} is already in group "{table.group.name}"', ErrorKind.TABLE_GROUP_CONFLICT)

    def push_table(self, table) -> None:
        self.table_ids.append(table.id)

    def link_tables(self) -> None:
        """Claim the member tables once the group is accepted."""
        for table in self.tables:
            table.group_id = self.id

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
        model["tableGroups"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
