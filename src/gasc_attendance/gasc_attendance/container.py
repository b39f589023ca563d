from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PERIODS_PER_DAY
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .departments.registry import DepartmentRegistry
from .reports.service import ReportService
from .storage.json_file_store import JsonFileRecordStore
from .storage.memory_store import InMemoryRecordStore
from .storage.mysql_store import MySQLRecordStore
from .storage.record_store import RecordStore
from .students.registry import StudentRegistry
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    store: RecordStore

    departments: DepartmentRegistry
    students: StudentRegistry

    auth_service: AuthService
    attendance_service: AttendanceService
    report_service: ReportService

    periods_per_day: int


def build_store(
    backend: str,
    *,
    data_dir: Union[str, Path, None] = None,
    db_config: Optional[dict] = None,
) -> RecordStore:
    backend = (backend or "file").lower()
    if backend == "memory":
        return InMemoryRecordStore()
    if backend == "file":
        return JsonFileRecordStore(data_dir or "data")
    if backend == "mysql":
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql storage backend")
        store = MySQLRecordStore(DatabaseConnection(DBConfig.from_dict(db_config)))
        store.ensure_schema()
        return store
    raise ValidationError(f"Unknown storage backend: {backend}")


def build_container(
    *,
    store: RecordStore,
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
    auth_latency_seconds: float = 0.0,
) -> Container:
    departments = DepartmentRegistry(store)
    students = StudentRegistry(store)
    departments.load()
    students.load()

    auth_service = AuthService(store, latency_seconds=auth_latency_seconds)
    attendance_service = AttendanceService(store, students)
    report_service = ReportService(attendance_service, departments, periods_per_day=periods_per_day)

    return Container(
        store=store,
        departments=departments,
        students=students,
        auth_service=auth_service,
        attendance_service=attendance_service,
        report_service=report_service,
        periods_per_day=int(periods_per_day),
    )
