"""Backup the record store.

Note: Writes every collection into one timestamped JSON file under backups/.
Works with any STORAGE_BACKEND.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.gasc_attendance.gasc_attendance.container import build_store
from src.gasc_attendance.gasc_attendance.core.enums import Collection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        getattr(settings, "STORAGE_BACKEND", "file"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_store_{ts}.json"

    snapshot = {c.value: store.load(c) for c in Collection}
    out_file.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
