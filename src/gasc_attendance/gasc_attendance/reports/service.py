from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from ..attendance.model import AttendanceRecord, StatusCounts
from ..attendance.service import AttendanceService, count_statuses
from ..common.datetime_utils import dates_between
from ..core.constants import DEFAULT_PERIODS_PER_DAY, EXCEL_MAX_COLUMNS
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.model import get_academic_year
from ..departments.registry import DepartmentRegistry
from .excel_exporter import column_count, export_attendance_to_excel
from .model import ExportedFile, ReportData

Exporter = Callable[..., ExportedFile]


def summarize(records: Iterable[AttendanceRecord]) -> StatusCounts:
    """Counts over the marked periods only; unmarked periods are not counted."""

    return count_statuses(status for r in records for status in r.periods.values())


class ReportService:
    def __init__(
        self,
        attendance: AttendanceService,
        departments: DepartmentRegistry,
        *,
        exporter: Optional[Exporter] = None,
        periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
    ):
        self._attendance = attendance
        self._departments = departments
        self._exporter = exporter or export_attendance_to_excel
        self._periods_per_day = int(periods_per_day)

    def build_report(self, *, start_date: str, end_date: str, department_id: str, year_id: str) -> ReportData:
        records = self._attendance.get_processed_records(start_date, end_date, department_id, year_id)
        return ReportData(
            start_date=start_date,
            end_date=end_date,
            department_id=department_id,
            year_id=year_id,
            date_range=dates_between(start_date, end_date),
            records=records,
            stats=summarize(records),
        )

    def export(
        self,
        *,
        start_date: str,
        end_date: str,
        department_id: str,
        year_id: str,
        periods_per_day: Optional[int] = None,
        today: Optional[date] = None,
    ) -> ExportedFile:
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError("Department not found")
        year = get_academic_year(year_id)
        if not year:
            raise NotFoundError("Academic year not found")

        periods_per_day = periods_per_day or self._periods_per_day
        days = len(dates_between(start_date, end_date))
        if column_count(days, periods_per_day) > EXCEL_MAX_COLUMNS:
            raise ValidationError("Date range is too long to export to a single sheet")

        report = self.build_report(
            start_date=start_date,
            end_date=end_date,
            department_id=department_id,
            year_id=year_id,
        )
        return self._exporter(
            report.records,
            report.date_range,
            department,
            year.name,
            periods_per_day,
            today=today,
        )
