"""
Semantic validation errors raised while building the schema model.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    DUPLICATE_SCHEMA_NAME = "duplicate_schema_name"
    DUPLICATE_TABLE_NAME = "duplicate_table_name"
    DUPLICATE_ENUM_NAME = "duplicate_enum_name"
    DUPLICATE_TAG_NAME = "duplicate_tag_name"
    DUPLICATE_TABLE_GROUP_NAME = "duplicate_table_group_name"
    DUPLICATE_REF = "duplicate_ref"
    DUPLICATE_FIELD_NAME = "duplicate_field_name"
    DUPLICATE_ENUM_VALUE = "duplicate_enum_value"
    MISSING_SCHEMA = "missing_schema"
    MISSING_TABLE = "missing_table"
    MISSING_FIELD = "missing_field"
    MISSING_KEY = "missing_key"
    INVALID_REF = "invalid_ref"
    INVALID_ELEMENT = "invalid_element"
    TABLE_GROUP_CONFLICT = "table_group_conflict"


class SemanticError(Exception):
    """Raised on the first invalid element; aborts the whole model build."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INVALID_ELEMENT,
                 location: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.location = location

    @property
    def line(self) -> Optional[int]:
        return ((self.location or {}).get("start") or {}).get("line")

    @property
    def column(self) -> Optional[int]:
        return ((self.location or {}).get("start") or {}).get("column")

    def to_dict(self) -> Dict[str, Any]:
        d = {"kind": self.kind.value, "message": self.message}
        if self.location:
            d["location"] = self.location
        return d

    def __str__(self) -> str:
        if self.line is not None:
            return f"Line {self.line}:{self.column or 0} - {self.message}"
        return self.message
