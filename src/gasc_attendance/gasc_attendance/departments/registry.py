from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.ids import IdFactory, new_id
from ..common.patching import apply_patch
from ..core.enums import Collection
from ..storage.record_store import RecordStore
from .model import Department, DepartmentPatch

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS: tuple[Department, ...] = (
    Department(id="1", name="Computer Science", code="CS"),
    Department(id="2", name="Electrical Engineering", code="EE"),
    Department(id="3", name="Mechanical Engineering", code="ME"),
    Department(id="4", name="Civil Engineering", code="CE"),
)


class DepartmentRegistry:
    """In-memory mirror of the ``departments`` collection."""

    def __init__(self, store: RecordStore, *, id_factory: IdFactory = new_id):
        self._store = store
        self._new_id = id_factory
        self._departments: list[Department] = []

    def load(self) -> None:
        """Read the collection, seeding the defaults when it is empty."""

        loaded = [Department.from_dict(r) for r in self._store.load(Collection.DEPARTMENTS)]
        if not loaded:
            loaded = list(DEFAULT_DEPARTMENTS)
            self._store.save(Collection.DEPARTMENTS, [d.to_dict() for d in loaded])
            logger.info("Seeded %d default departments", len(loaded))
        self._departments = loaded

    def _persist(self) -> None:
        self._store.save(Collection.DEPARTMENTS, [d.to_dict() for d in self._departments])

    def list_all(self) -> Sequence[Department]:
        return list(self._departments)

    def add(self, *, name: str, code: str) -> Department:
        department = Department(id=self._new_id(), name=name, code=code)
        self._departments = [*self._departments, department]
        self._persist()
        return department

    def update(self, department_id: str, patch: DepartmentPatch) -> None:
        if self.get_by_id(department_id) is None:
            logger.debug("Ignoring update for unknown department %s", department_id)
            return

        self._departments = [
            apply_patch(d, patch) if d.id == department_id else d for d in self._departments
        ]
        self._persist()

    def get_by_id(self, department_id: str) -> Optional[Department]:
        return next((d for d in self._departments if d.id == department_id), None)
