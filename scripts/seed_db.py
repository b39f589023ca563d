from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.gasc_attendance.gasc_attendance.container import build_container, build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        getattr(settings, "STORAGE_BACKEND", "file"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    # Registries seed themselves on load when their collection is empty.
    container = build_container(store=store)

    print(
        "OK: Seeded store -> "
        f"departments={len(container.departments.list_all())} students={len(container.students.list_all())}"
    )


if __name__ == "__main__":
    main()
