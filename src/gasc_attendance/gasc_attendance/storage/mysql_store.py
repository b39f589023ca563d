from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.enums import Collection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .record_store import RecordStore, decode_collection, encode_collection, slot_key

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS record_slots (
    slot_key VARCHAR(64) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


class MySQLRecordStore(RecordStore):
    """Stores each collection as one JSON blob row in ``record_slots``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def ensure_schema(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(SCHEMA_SQL)

    def load(self, collection: Collection) -> list[dict[str, Any]]:
        key = slot_key(collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM record_slots WHERE slot_key=%s", (key,))
            r = fetchone(cur)
        return decode_collection(r["payload"] if r else None, slot=key)

    def save(self, collection: Collection, items: Sequence[dict[str, Any]]) -> None:
        key = slot_key(collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO record_slots(slot_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, encode_collection(items)),
            )
        logger.debug("Saved %d item(s) to slot %s", len(items), key)

    def remove(self, collection: Collection) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM record_slots WHERE slot_key=%s", (slot_key(collection),))
