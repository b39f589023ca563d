from __future__ import annotations

import itertools
from datetime import date

import pytest

from src.gasc_attendance.gasc_attendance.attendance.service import AttendanceService
from src.gasc_attendance.gasc_attendance.departments.registry import DepartmentRegistry
from src.gasc_attendance.gasc_attendance.storage.memory_store import InMemoryRecordStore
from src.gasc_attendance.gasc_attendance.students.registry import StudentRegistry


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def departments(store, id_factory):
    registry = DepartmentRegistry(store, id_factory=id_factory)
    registry.load()
    return registry


@pytest.fixture
def students(store, id_factory):
    registry = StudentRegistry(store, id_factory=id_factory)
    registry.load()
    return registry


@pytest.fixture
def attendance(store, students, id_factory):
    return AttendanceService(store, students, id_factory=id_factory)


@pytest.fixture
def fixed_today():
    return date(2024, 3, 6)
