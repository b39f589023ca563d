from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student.

    ``department_id``/``year_id`` are unchecked references to Department and
    AcademicYear.
    """

    id: str
    name: str
    reg_number: str
    department_id: str
    year_id: str
    email: Optional[str] = None
    phone_number: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "regNumber": self.reg_number,
            "departmentId": self.department_id,
            "yearId": self.year_id,
        }
        if self.email is not None:
            data["email"] = self.email
        if self.phone_number is not None:
            data["phoneNumber"] = self.phone_number
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Student":
        return cls(
            id=str(raw["id"]),
            name=raw.get("name", ""),
            reg_number=raw.get("regNumber", ""),
            department_id=str(raw.get("departmentId", "")),
            year_id=str(raw.get("yearId", "")),
            email=raw.get("email"),
            phone_number=raw.get("phoneNumber"),
        )


@dataclass(frozen=True)
class StudentPatch:
    name: Optional[str] = None
    reg_number: Optional[str] = None
    department_id: Optional[str] = None
    year_id: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
