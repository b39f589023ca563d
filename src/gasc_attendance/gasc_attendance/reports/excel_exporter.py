from __future__ import annotations

import io
import logging
import re
from datetime import date
from typing import Optional, Sequence

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..attendance.model import AttendanceRecord
from ..attendance.service import count_statuses
from ..common.datetime_utils import format_display_date, format_iso_date, today_utc
from ..core.constants import DEFAULT_PERIODS_PER_DAY, EXCEL_SHEET_NAME_FORBIDDEN, EXCEL_SHEET_NAME_LIMIT
from ..core.enums import AttendanceStatus
from ..departments.model import Department
from .model import ExportedFile

logger = logging.getLogger(__name__)

_FORBIDDEN_SHEET_CHARS = re.compile(EXCEL_SHEET_NAME_FORBIDDEN)

# status -> (background, font colour)
STATUS_COLORS: dict[str, tuple[str, str]] = {
    AttendanceStatus.PRESENT.value: ("C6EFCE", "006100"),
    AttendanceStatus.ABSENT.value: ("FFC7CE", "9C0006"),
    AttendanceStatus.LATE.value: ("FFEB9C", "9C5700"),
    AttendanceStatus.EXCUSED.value: ("DDEBF7", "305496"),
}

NAME_COLUMN_WIDTH = 30
REG_NUMBER_COLUMN_WIDTH = 15
DATA_COLUMN_WIDTH = 12

HEADER_ROWS = 2
LEADING_COLUMNS = 2
SUMMARY_COLUMNS = ("Present", "Absent", "Late", "Excused")


def column_count(day_count: int, periods_per_day: int) -> int:
    return LEADING_COLUMNS + day_count * periods_per_day + len(SUMMARY_COLUMNS)


def build_sheet_name(department: Department, year: str) -> str:
    name = _FORBIDDEN_SHEET_CHARS.sub("-", f"{department.name} - {year}")
    return name[:EXCEL_SHEET_NAME_LIMIT]


def build_filename(department: Department, year: str, today: date) -> str:
    return f"Attendance_{department.code}_{year}_{format_iso_date(today)}.xlsx"


def build_rows(
    records: Sequence[AttendanceRecord],
    date_range: Sequence[str],
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
) -> list[list[object]]:
    """Two header rows followed by one row per record.

    Each ``(date, period)`` cell reads ``record.periods[period]``; the date is
    only a header label. Missing periods export as absent.
    """

    header1: list[object] = ["Student Name", "Reg Number"]
    header2: list[object] = ["", ""]
    for day in date_range:
        label = format_display_date(day)
        for p in range(1, periods_per_day + 1):
            header1.append(label)
            header2.append(f"Period {p}")
    header1.extend(["Total"] * len(SUMMARY_COLUMNS))
    header2.extend(SUMMARY_COLUMNS)

    rows = [header1, header2]
    for record in records:
        statuses = [
            record.periods.get(p) or AttendanceStatus.ABSENT.value
            for _ in date_range
            for p in range(1, periods_per_day + 1)
        ]
        counts = count_statuses(statuses)
        rows.append(
            [
                record.student.name,
                record.student.reg_number,
                *statuses,
                counts.present,
                counts.absent,
                counts.late,
                counts.excused,
            ]
        )
    return rows


def _style_sheet(ws, *, row_count: int, status_columns: int) -> None:
    header_font = Font(bold=True)
    for row in ws.iter_rows(min_row=1, max_row=HEADER_ROWS):
        for cell in row:
            cell.font = header_font
            cell.alignment = Alignment(horizontal="center")

    fills = {
        status: (PatternFill(start_color=bg, end_color=bg, fill_type="solid"), Font(color=fg))
        for status, (bg, fg) in STATUS_COLORS.items()
    }
    first_col = LEADING_COLUMNS + 1
    last_col = LEADING_COLUMNS + status_columns
    for r in range(HEADER_ROWS + 1, row_count + 1):
        for c in range(first_col, last_col + 1):
            cell = ws.cell(row=r, column=c)
            style = fills.get(cell.value)
            if style:
                cell.fill, cell.font = style

    total_columns = LEADING_COLUMNS + status_columns + len(SUMMARY_COLUMNS)
    ws.column_dimensions["A"].width = NAME_COLUMN_WIDTH
    ws.column_dimensions["B"].width = REG_NUMBER_COLUMN_WIDTH
    for c in range(LEADING_COLUMNS + 1, total_columns + 1):
        ws.column_dimensions[get_column_letter(c)].width = DATA_COLUMN_WIDTH


def export_attendance_to_excel(
    records: Sequence[AttendanceRecord],
    date_range: Sequence[str],
    department: Department,
    year: str,
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
    *,
    today: Optional[date] = None,
) -> ExportedFile:
    """Build the multi-period workbook for one department/year.

    ``year`` is the academic year's display name; it appears in both the sheet
    name and the file name.
    """

    rows = build_rows(records, date_range, periods_per_day)
    sheet_name = build_sheet_name(department, year)
    filename = build_filename(department, year, today or today_utc())

    df = pd.DataFrame(rows)
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, header=False, sheet_name=sheet_name)
        _style_sheet(
            writer.sheets[sheet_name],
            row_count=len(rows),
            status_columns=len(date_range) * periods_per_day,
        )

    logger.info("Exported %d record(s) over %d day(s) to %s", len(records), len(date_range), filename)
    return ExportedFile(filename=filename, sheet_name=sheet_name, content=output.getvalue())
