from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRoster(Protocol):
    """What the attendance engine needs from the student registry."""

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_department_and_year(self, department_id: str, year_id: str) -> Sequence[Student]:
        raise NotImplementedError
