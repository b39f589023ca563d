from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Department:
    """Domain entity: an academic department.

    Note: name/code uniqueness is not enforced.
    """

    id: str
    name: str
    code: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Department":
        return cls(id=str(raw["id"]), name=raw.get("name", ""), code=raw.get("code", ""))


@dataclass(frozen=True)
class DepartmentPatch:
    name: Optional[str] = None
    code: Optional[str] = None


@dataclass(frozen=True)
class AcademicYear:
    id: str
    name: str
    code: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


ACADEMIC_YEARS: tuple[AcademicYear, ...] = (
    AcademicYear(id="1", name="First Year", code="FY"),
    AcademicYear(id="2", name="Second Year", code="SY"),
    AcademicYear(id="3", name="Third Year", code="TY"),
    AcademicYear(id="4", name="PG First Year", code="PG1"),
    AcademicYear(id="5", name="PG Second Year", code="PG2"),
)


def get_academic_year(year_id: str) -> Optional[AcademicYear]:
    return next((y for y in ACADEMIC_YEARS if y.id == str(year_id)), None)
