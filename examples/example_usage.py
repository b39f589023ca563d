"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; all attendance logic lives in the services.
"""

from src.gasc_attendance.gasc_attendance.container import build_container
from src.gasc_attendance.gasc_attendance.storage.memory_store import InMemoryRecordStore


def main():
    container = build_container(store=InMemoryRecordStore())
    svc = container.attendance_service

    svc.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    svc.mark_attendance("2", "2024-03-04", 1, "late", "1", "2")

    for record in svc.get_processed_records("2024-03-04", "2024-03-10", "1", "2"):
        print(record.student.name, record.periods)


if __name__ == "__main__":
    main()
