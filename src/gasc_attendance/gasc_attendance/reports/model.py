from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..attendance.model import AttendanceRecord, StatusCounts
from ..core.constants import EXCEL_MIMETYPE


@dataclass(frozen=True)
class ReportData:
    start_date: str
    end_date: str
    department_id: str
    year_id: str
    date_range: list[str]
    records: list[AttendanceRecord]
    stats: StatusCounts

    def to_dict(self) -> dict[str, Any]:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
            "departmentId": self.department_id,
            "yearId": self.year_id,
            "dateRange": list(self.date_range),
            "records": [r.to_dict() for r in self.records],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    sheet_name: str
    content: bytes
    mimetype: str = EXCEL_MIMETYPE
