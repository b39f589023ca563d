from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Sequence, Union

from ..core.enums import Collection
from .record_store import RecordStore, decode_collection, encode_collection, slot_key

logger = logging.getLogger(__name__)


class JsonFileRecordStore(RecordStore):
    """One ``<slot>.json`` file per collection inside ``data_dir``.

    Saves go through a temp file + ``os.replace`` so a reader never sees a
    half-written collection.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self._dir = Path(data_dir)

    def _path(self, collection: Collection) -> Path:
        return self._dir / f"{slot_key(collection)}.json"

    def load(self, collection: Collection) -> list[dict[str, Any]]:
        path = self._path(collection)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError:
            logger.warning("Could not read %s; treating it as empty", path, exc_info=True)
            return []
        return decode_collection(raw, slot=path.name)

    def save(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._path(collection)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(encode_collection(items))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d item(s) to %s", len(items), path)

    def remove(self, collection: Collection) -> None:
        self._path(collection).unlink(missing_ok=True)
