"""
Ref - a relationship between two endpoints.

A ref only records itself on the fields it connects in link_endpoints(),
which the schema calls after the duplicate check has passed.
"""
from typing import Any, Dict, List, Optional

from .config import DEFAULT_SCHEMA_NAME
from .element import Element
from .endpoint import Endpoint
from .errors import ErrorKind


class Ref(Element):
    """A relationship between the fields of two endpoints."""
    ID_KIND = "ref"

    def __init__(self, data: Dict[str, Any], schema):
        super().__init__(schema.db_state, data.get("token"))
        self.name: Optional[str] = data.get("name")
        self.on_delete: Optional[str] = data.get("onDelete")
        self.on_update: Optional[str] = data.get("onUpdate")
        self.schema_id: int = schema.id
        self.endpoints: List[Endpoint] = []

        self.process_endpoints(data.get("endpoints") or [])

    @property
    def schema(self):
        return self.db_state.get("schema", self.schema_id)

    def process_endpoints(self, raw_endpoints: List[Dict[str, Any]]) -> None:
        if len(raw_endpoints) != 2:
            self.error("Reference must have exactly two endpoints", ErrorKind.INVALID_REF)

        for raw_endpoint in raw_endpoints:
            self.endpoints.append(Endpoint(raw_endpoint, self))
            if raw_endpoint.get("schemaName") == DEFAULT_SCHEMA_NAME:
                self.schema.database.has_default_schema = True

        first, second = self.endpoints
        if first.equals(second):
            self.error("Two endpoints are the same", ErrorKind.INVALID_REF)
        if len(first.field_ids) != len(second.field_ids):
            self.error("Two endpoints have unequal number of fields", ErrorKind.INVALID_REF)

    def link_endpoints(self) -> None:
        for endpoint in self.endpoints:
            endpoint.link_fields()

    def equals(self, other: "Ref") -> bool:
        """Whether both refs connect the same pair of endpoints, in either direction."""
        return (any(ep.equals(other.endpoints[0]) for ep in self.endpoints)
                and any(ep.equals(other.endpoints[1]) for ep in self.endpoints))

    def export(self) -> Dict[str, Any]:
        return {**self.shallow_export(), **self.export_child()}

    def export_child(self) -> Dict[str, Any]:
        return {"endpoints": [e.export() for e in self.endpoints]}

    def export_child_ids(self) -> Dict[str, Any]:
        return {"endpointIds": [e.id for e in self.endpoints]}

    def export_parent_ids(self) -> Dict[str, Any]:
        return {"schemaId": self.schema_id}

    def shallow_export(self) -> Dict[str, Any]:
        return {"name": self.name, "onDelete": self.on_delete, "onUpdate": self.on_update}

    def normalize(self, model: Dict[str, Dict[int, Any]]) -> None:
        model["refs"][self.id] = {
            "id": self.id,
            **self.shallow_export(),
            **self.export_child_ids(),
            **self.export_parent_ids(),
        }
        for endpoint in self.endpoints:
            endpoint.normalize(model)
