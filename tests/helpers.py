"""Raw record builders shaped like the schema parser output."""
from typing import Any, Dict, List, Optional


def raw_field(name: str, type_name: str = "int", type_schema: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    field_type = {"type_name": type_name}
    if type_schema:
        field_type["schemaName"] = type_schema
    return {"name": name, "type": field_type, **kwargs}


def raw_table(name: str, fields: Optional[List[Dict[str, Any]]] = None,
              schema: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    table = {"name": name, "fields": fields if fields is not None else [raw_field("id", pk=True)], **kwargs}
    if schema:
        table["schemaName"] = schema
    return table


def raw_endpoint(table: str, fields: List[str], relation: str = "1",
                 schema: Optional[str] = None) -> Dict[str, Any]:
    endpoint = {"tableName": table, "fieldNames": fields, "relation": relation}
    if schema:
        endpoint["schemaName"] = schema
    return endpoint


def raw_ref(left: Dict[str, Any], right: Dict[str, Any], schema: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    ref = {"endpoints": [left, right], **kwargs}
    if schema:
        ref["schemaName"] = schema
    return ref


def raw_enum(name: str, values: List[str], schema: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    enum = {"name": name, "values": [{"name": v} for v in values], **kwargs}
    if schema:
        enum["schemaName"] = schema
    return enum


def token(line: int, column: int = 1) -> Dict[str, Any]:
    return {"start": {"offset": 0, "line": line, "column": column}, "end": {"offset": 0, "line": line, "column": column}}
