"""Endpoint - one side of a ref, resolved against the tables of the database."""
from typing import Any, Dict, List, Optional

from .element import Element
from .errors import ErrorKind
from .utils import qualified_name, raw_table_name


class Endpoint(Element):
    """One side of a ref: a table and the fields the relation goes through."""
    ID_KIND = "endpoint"

    def __init__(self, data: Dict[str, Any], ref):
        super().__init__(ref.db_state, data.get("token"))
        self.relation: Optional[str] = data.get("relation")
        self.schema_name: Optional[str] = data.get("schemaName")
        self.table_name: str = data.get("tableName")
        self.field_names: List[str] = list(data.get("fieldNames") or [])
        self.ref_id: int = ref.id
        self.field_ids: List[int] = []

        # Names in the raw record may be aliases, so resolve the real table
        database = ref.schema.database
        table = database.find_table({"name": self.table_name, "schemaName": self.schema_name}, requester=self)
        if not table:
            self.error(
                f"Can't find table {raw_table_name(self.schema_name, self.table_name)}",
                ErrorKind.MISSING_TABLE,
            )
        self.set_fields(self.field_names, table)

    @property
    def ref(self):
        return self.db_state.get("ref", self.ref_id)

    @property
    def fields(self) -> list:
        return self.db_state.resolve("field", self.field_ids)

    def set_fields(self, field_names: List[str], table) -> None:
        names = list(field_names)
        if not names:
            pk_field = next((f for f in table.fields if f.pk), None)
            if pk_field:
                names.append(pk_field.name)
            else:
                pk_index = next((i for i in table.indexes if i.pk), None)
                if not pk_index:
                    self.error(
                        f"Can't find primary or composite key in table {qualified_name(table.schema, table.name)}",
                        ErrorKind.MISSING_KEY,
                    )
                names = [c.value for c in pk_index.columns]

        for field_name in names:
            field = table.find_field(field_name)
            if not field:
                self.error(
                    f'Can\'t find field "{field_name}" in table {qualified_name(table.schema, table.name)}',
                    ErrorKind.MISSING_FIELD,
                )
            self.field_ids.append(field.id)

    def link_fields(self) -> None:
        """Record this endpoint on its fields once the ref is accepted."""
        for field in self.fields:
            field.push_endpoint(self)

    def equals(self, other: "Endpoint") -> bool:
        return sorted(self.field_ids) == sorted(other.field_ids)

    def export(self) -> Dict[str, Any]:
        return self.shallow_export()

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"refId": self.ref_id, "fieldIds": list(self.field_ids)}

    def shallow_export(self) -> Dict[str, Any]:
        return {
            "schemaName": self.schema_name,
            "tableName": self.table_name,
            "fieldNames": list(self.field_names),
            "relation": self.relation,
        }

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["endpoints"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_parent_ids(),
        }
