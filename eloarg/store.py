"""
store.py
key -> option lookup used by the registry and the parser.

Only the narrow contract below is relied on: has, get, set, count,
enumeration of occupied slots and free.
"""
from typing import Any, Dict, Iterator, Optional, Tuple


class HashTable:
    def __init__(self):
        self._table: Dict[str, Any] = {}

    def has(self, key: Optional[str]) -> bool:
        return bool(key) and key in self._table

    def get(self, key: Optional[str]) -> Any:
        if not key:
            return None
        return self._table.get(key)

    def set(self, key: str, value: Any) -> None:
        self._table[key] = value

    def count(self) -> int:
        return len(self._table)

    def slots(self) -> Iterator[Tuple[str, Any]]:
        # snapshot, so callers may free while enumerating
        return iter(list(self._table.items()))

    def free(self) -> None:
        self._table.clear()
