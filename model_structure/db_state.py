"""
Per-database identifier allocator and element arena.

Every element allocates exactly one id from the DbState of its database and
registers itself, so relations between elements can be kept as ids and
resolved in O(1).
"""
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional


ID_BASE = 1


class DbState:
    def __init__(self):
        self._counters: Dict[str, int] = defaultdict(lambda: ID_BASE)
        self._elements: Dict[str, Dict[int, Any]] = defaultdict(dict)

    def generate_id(self, kind: str) -> int:
        element_id = self._counters[kind]
        self._counters[kind] += 1
        return element_id

    def register(self, element) -> None:
        self._elements[element.ID_KIND][element.id] = element

    def get(self, kind: str, element_id: Optional[int]):
        if element_id is None:
            return None
        return self._elements.get(kind, {}).get(element_id)

    def resolve(self, kind: str, element_ids: Iterable[int]) -> List[Any]:
        """Resolve ids in order, skipping any that are not registered."""
        bucket = self._elements.get(kind, {})
        return [bucket[i] for i in element_ids if i in bucket]

    def count(self, kind: str) -> int:
        return len(self._elements.get(kind, {}))
