# Schema model structure - validated, cross-referenced model of parsed schema records

from .config import DEFAULT_SCHEMA_NAME, NORMALIZED_BUCKETS, EnumBinding
from .database import Database
from .db_state import DbState
from .element import Element
from .endpoint import Endpoint
from .enum_value import EnumValue
from .enums import Enum
from .errors import ErrorKind, SemanticError
from .field import Field
from .index_column import IndexColumn
from .indexes import Index
from .ref import Ref
from .schema import Schema
from .table import Table
from .table_group import TableGroup
from .tag import Tag

__all__ = [
    'DEFAULT_SCHEMA_NAME', 'NORMALIZED_BUCKETS', 'EnumBinding',
    'DbState', 'Element', 'ErrorKind', 'SemanticError',
    'Database', 'Schema', 'Table', 'Field', 'Index', 'IndexColumn',
    'Enum', 'EnumValue', 'Ref', 'Endpoint', 'Tag', 'TableGroup',
]
