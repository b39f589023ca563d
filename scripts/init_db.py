from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.gasc_attendance.gasc_attendance.database.connection import DBConfig, DatabaseConnection
from src.gasc_attendance.gasc_attendance.storage.mysql_store import MySQLRecordStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    MySQLRecordStore(DatabaseConnection(DBConfig.from_dict(db_config))).ensure_schema()
    print(
        "OK: record_slots ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
