"""Index - a (possibly composite) index or key of a table."""
from typing import Any, Dict, List

from .element import Element
from .errors import ErrorKind
from .index_column import IndexColumn
from .utils import note_value, qualified_name


class Index(Element):
    ID_KIND = "index"

    def __init__(self, data: Dict[str, Any], table):
        super().__init__(table.db_state, data.get("token"))
        self.name = data.get("name")
        self.type = data.get("type")
        self.unique = data.get("unique")
        self.pk = data.get("pk")
        self.note = note_value(data.get("note"))
        self.table_id: int = table.id
        self.columns: List[IndexColumn] = []

        self.process_index_columns(data.get("columns") or [])

    @property
    def table(self):
        return self.db_state.get("table", self.table_id)

    def process_index_columns(self, raw_columns: List[Dict[str, Any]]) -> None:
        for raw_column in raw_columns:
            self.push_index_column(IndexColumn(raw_column, self))

    def push_index_column(self, column: IndexColumn) -> None:
        self.check_index_column(column)
        self.columns.append(column)

    def check_index_column(self, column: IndexColumn) -> None:
        table = self.table
        if column.type == "column" and not table.find_field(column.value):
            column.error(
                f'Column "{column.value}" does not exist in table {qualified_name(table.schema, table.name)}',
                ErrorKind.MISSING_FIELD,
            )

    def export(self) -> Dict[str, Any]:
        return {
            "columns": [c.export() for c in self.columns],
            **self.shallow_export(),
        }

    def export_child_ids(self) -> Dict[str, Any]:
        return {"columnIds": [c.id for c in self.columns]}

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"tableId": self.table_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "unique": self.unique,
            "pk": self.pk,
            "note": self.note,
        }

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["indexes"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
        for column in self.columns:
            column.normalize(model)
