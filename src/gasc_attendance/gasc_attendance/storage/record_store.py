from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol, Sequence

from ..core.constants import STORAGE_KEY_PREFIX
from ..core.enums import Collection

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Whole-collection key-value persistence.

    Each collection lives in its own named slot and is always read and written
    in full. Missing or unreadable slots load as an empty list.
    """

    def load(self, collection: Collection) -> list[dict[str, Any]]:
        raise NotImplementedError

    def save(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        raise NotImplementedError

    def remove(self, collection: Collection) -> None:
        raise NotImplementedError


def slot_key(collection: Collection) -> str:
    return f"{STORAGE_KEY_PREFIX}{Collection(collection).value}"


def encode_collection(items: Sequence[dict[str, Any]]) -> str:
    return json.dumps(list(items), ensure_ascii=False)


def decode_collection(raw: Optional[str], *, slot: str) -> list[dict[str, Any]]:
    """Decode a stored payload; corrupt content counts as absent."""

    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Slot %s holds invalid JSON; treating it as empty", slot)
        return []
    if not isinstance(data, list):
        logger.warning("Slot %s does not hold a JSON array; treating it as empty", slot)
        return []
    return [item for item in data if isinstance(item, dict)]
