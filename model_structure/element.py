"""
Base class of every schema model element.
"""
from typing import Any, Dict, Optional

from .db_state import DbState
from .errors import ErrorKind, SemanticError


class Element:
    ID_KIND = ""

    def __init__(self, db_state: DbState, token: Optional[Dict[str, Any]] = None):
        self.token = token
        self.db_state = db_state
        self.id = db_state.generate_id(self.ID_KIND)
        db_state.register(self)

    def error(self, message: str, kind: ErrorKind = ErrorKind.INVALID_ELEMENT):
        raise SemanticError(message, kind=kind, location=self.token)

    def __repr__(self) -> str:
        name = getattr(self, "name", None)
        return f"<{type(self).__name__} id={self.id} name={name!r}>"
