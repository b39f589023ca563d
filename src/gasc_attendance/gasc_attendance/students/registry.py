from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.ids import IdFactory, new_id
from ..common.patching import apply_patch
from ..core.enums import Collection
from ..storage.record_store import RecordStore
from .model import Student, StudentPatch
from .repository import StudentRoster

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS: tuple[Student, ...] = (
    Student(
        id="1",
        name="John Doe",
        reg_number="CS2020001",
        department_id="1",
        year_id="2",
        email="john.doe@example.com",
    ),
    Student(
        id="2",
        name="Jane Smith",
        reg_number="CS2020002",
        department_id="1",
        year_id="2",
        email="jane.smith@example.com",
    ),
    Student(
        id="3",
        name="Michael Johnson",
        reg_number="EE2021001",
        department_id="2",
        year_id="1",
        email="michael.j@example.com",
    ),
)


class StudentRegistry(StudentRoster):
    """In-memory mirror of the ``students`` collection."""

    def __init__(self, store: RecordStore, *, id_factory: IdFactory = new_id):
        self._store = store
        self._new_id = id_factory
        self._students: list[Student] = []

    def load(self) -> None:
        loaded = [Student.from_dict(r) for r in self._store.load(Collection.STUDENTS)]
        if not loaded:
            loaded = list(SAMPLE_STUDENTS)
            self._store.save(Collection.STUDENTS, [s.to_dict() for s in loaded])
            logger.info("Seeded %d sample students", len(loaded))
        self._students = loaded

    def _persist(self) -> None:
        self._store.save(Collection.STUDENTS, [s.to_dict() for s in self._students])

    def list_all(self) -> Sequence[Student]:
        return list(self._students)

    def add(
        self,
        *,
        name: str,
        reg_number: str,
        department_id: str,
        year_id: str,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> Student:
        student = Student(
            id=self._new_id(),
            name=name,
            reg_number=reg_number,
            department_id=department_id,
            year_id=year_id,
            email=email,
            phone_number=phone_number,
        )
        self._students = [*self._students, student]
        self._persist()
        return student

    def update(self, student_id: str, patch: StudentPatch) -> None:
        if self.get_by_id(student_id) is None:
            logger.debug("Ignoring update for unknown student %s", student_id)
            return

        self._students = [apply_patch(s, patch) if s.id == student_id else s for s in self._students]
        self._persist()

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def list_by_department(self, department_id: str) -> Sequence[Student]:
        return [s for s in self._students if s.department_id == department_id]

    def list_by_department_and_year(self, department_id: str, year_id: str) -> Sequence[Student]:
        return [s for s in self._students if s.department_id == department_id and s.year_id == year_id]
