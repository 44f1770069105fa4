"""
Model structure constants shared by every element of the schema model.
"""
from enum import Enum


# Schema used for records that do not name one
DEFAULT_SCHEMA_NAME = "public"
DEFAULT_SCHEMA_NOTE = f"Default {DEFAULT_SCHEMA_NAME.capitalize()} Schema"

# Buckets of Database.normalize(), in output order
NORMALIZED_BUCKETS = (
    "database", "schemas", "refs", "enums", "tableGroups", "tags",
    "tables", "endpoints", "enumValues", "indexes", "indexColumns", "fields",
)


class EnumBinding(str, Enum):
    """When enums are linked to the fields that use them."""
    ON_ENUM_INSERT = "on_enum_insert"           # Only fields that exist when the enum is pushed
    AFTER_CONSTRUCTION = "after_construction"   # One pass once the whole database is built
