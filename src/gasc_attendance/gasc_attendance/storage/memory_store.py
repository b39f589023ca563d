from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Collection
from .record_store import RecordStore, decode_collection, encode_collection, slot_key


class InMemoryRecordStore(RecordStore):
    """Keeps serialized slots in a dict, like browser local storage."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._slots: dict[str, str] = dict(initial or {})

    def load(self, collection: Collection) -> list[dict[str, Any]]:
        key = slot_key(collection)
        return decode_collection(self._slots.get(key), slot=key)

    def save(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        self._slots[slot_key(collection)] = encode_collection(items)

    def remove(self, collection: Collection) -> None:
        self._slots.pop(slot_key(collection), None)

    def raw(self, collection: Collection) -> Optional[str]:
        """Serialized payload of a slot (debug/test helper)."""
        return self._slots.get(slot_key(collection))
