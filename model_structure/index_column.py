"""Index column - one member of an index: a column name, an expression or a string."""
from typing import Any, Dict

from .element import Element


class IndexColumn(Element):
    """A column, expression or string member of an index."""
    ID_KIND = "index_column"

    def __init__(self, data: Dict[str, Any], index):
        super().__init__(index.db_state, data.get("token"))
        self.type: str = data.get("type", "column")
        self.value: str = data.get("value")
        self.index_id: int = index.id

    @property
    def index(self):
        return self.db_state.get("index", self.index_id)

    def export(self) -> Dict[str, Any]:
        return self.shallow_export()

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"indexId": self.index_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["indexColumns"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_parent_ids(),
        }
