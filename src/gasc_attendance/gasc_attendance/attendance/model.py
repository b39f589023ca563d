from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..students.model import Student


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one mark for one student, date and period.

    ``(student_id, date, period)`` is the natural key; ``id`` is a surrogate
    assigned on creation. ``date`` is an ISO ``YYYY-MM-DD`` string.
    """

    id: str
    student_id: str
    date: str
    period: int
    status: str
    department_id: str
    year_id: str

    @property
    def key(self) -> tuple[str, str, int]:
        return (self.student_id, self.date, self.period)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "date": self.date,
            "period": self.period,
            "status": self.status,
            "departmentId": self.department_id,
            "yearId": self.year_id,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AttendanceEntry":
        return cls(
            id=str(raw.get("id", "")),
            student_id=str(raw.get("studentId", "")),
            date=raw.get("date", ""),
            period=raw.get("period"),
            status=raw.get("status"),
            department_id=str(raw.get("departmentId", "")),
            year_id=str(raw.get("yearId", "")),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model for reports: one student's statuses keyed by period number.

    Entries from different dates with the same period share one key; the
    last one in storage order wins.
    """

    student: Student
    periods: dict[int, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "student": self.student.to_dict(),
            "periods": {str(p): s for p, s in self.periods.items()},
        }


@dataclass(frozen=True)
class SheetRow:
    """One line of the take-attendance sheet."""

    student: Student
    status: str
    marked: bool

    def to_dict(self) -> dict[str, Any]:
        return {"student": self.student.to_dict(), "status": self.status, "marked": self.marked}


@dataclass(frozen=True)
class StatusCounts:
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late + self.excused

    @property
    def present_percentage(self) -> int:
        if self.total == 0:
            return 0
        return round(self.present / self.total * 100)

    def to_dict(self) -> dict[str, int]:
        return {
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
            "total": self.total,
            "presentPercentage": self.present_percentage,
        }
