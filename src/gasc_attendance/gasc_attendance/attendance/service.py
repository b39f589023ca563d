from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence

from ..common.ids import IdFactory, new_id
from ..core.enums import AttendanceStatus, Collection
from ..storage.record_store import RecordStore
from ..students.repository import StudentRoster
from .model import AttendanceEntry, AttendanceRecord, SheetRow, StatusCounts

logger = logging.getLogger(__name__)


def _narrow(
    entries: Iterable[AttendanceEntry],
    department_id: Optional[str],
    year_id: Optional[str],
) -> list[AttendanceEntry]:
    # Empty filters mean "any".
    out = []
    for e in entries:
        if department_id and e.department_id != department_id:
            continue
        if year_id and e.year_id != year_id:
            continue
        out.append(e)
    return out


def count_statuses(statuses: Iterable[str]) -> StatusCounts:
    """Tally the four known statuses; anything else is ignored."""

    c = Counter(statuses)
    return StatusCounts(
        present=c[AttendanceStatus.PRESENT.value],
        absent=c[AttendanceStatus.ABSENT.value],
        late=c[AttendanceStatus.LATE.value],
        excused=c[AttendanceStatus.EXCUSED.value],
    )


class AttendanceService:
    """Marks attendance and materializes report views.

    Every call reads the whole ``attendance`` collection from the store and,
    for writes, saves it back in full.
    """

    def __init__(self, store: RecordStore, students: StudentRoster, *, id_factory: IdFactory = new_id):
        self._store = store
        self._students = students
        self._new_id = id_factory

    def list_entries(self) -> list[AttendanceEntry]:
        return [AttendanceEntry.from_dict(r) for r in self._store.load(Collection.ATTENDANCE)]

    def _save(self, entries: Sequence[AttendanceEntry]) -> None:
        self._store.save(Collection.ATTENDANCE, [e.to_dict() for e in entries])

    def _upsert(
        self,
        entries: list[AttendanceEntry],
        *,
        student_id: str,
        date: str,
        period: int,
        status: str,
        department_id: str,
        year_id: str,
    ) -> None:
        key = (student_id, date, period)
        for i, e in enumerate(entries):
            if e.key == key:
                # Only the status moves; department/year stay as first recorded.
                entries[i] = replace(e, status=status)
                return

        entries.append(
            AttendanceEntry(
                id=self._new_id(),
                student_id=student_id,
                date=date,
                period=period,
                status=status,
                department_id=department_id,
                year_id=year_id,
            )
        )

    def mark_attendance(
        self,
        student_id: str,
        date: str,
        period: int,
        status: str,
        department_id: str,
        year_id: str,
    ) -> None:
        """Insert or overwrite the mark for ``(student_id, date, period)``.

        Input is stored as given: status, period and date are not validated.
        """

        entries = self.list_entries()
        self._upsert(
            entries,
            student_id=student_id,
            date=date,
            period=period,
            status=status,
            department_id=department_id,
            year_id=year_id,
        )
        self._save(entries)

    def mark_bulk(
        self,
        *,
        date: str,
        period: int,
        department_id: str,
        year_id: str,
        statuses: Mapping[str, str],
    ) -> int:
        """Save a whole sheet for the department/year roster in one write.

        Roster students missing from ``statuses`` are marked absent. Ids in
        ``statuses`` that are not on the roster are ignored.
        """

        roster = self._students.list_by_department_and_year(department_id, year_id)
        entries = self.list_entries()
        for student in roster:
            self._upsert(
                entries,
                student_id=student.id,
                date=date,
                period=period,
                status=statuses.get(student.id) or AttendanceStatus.ABSENT.value,
                department_id=department_id,
                year_id=year_id,
            )
        self._save(entries)
        logger.info(
            "Saved attendance for %d student(s) on %s period %s (dept=%s, year=%s)",
            len(roster),
            date,
            period,
            department_id,
            year_id,
        )
        return len(roster)

    def get_by_date_and_period(
        self,
        date: str,
        period: int,
        department_id: Optional[str] = None,
        year_id: Optional[str] = None,
    ) -> list[AttendanceEntry]:
        matches = (e for e in self.list_entries() if e.date == date and e.period == period)
        return _narrow(matches, department_id, year_id)

    def get_by_date_range(
        self,
        start_date: str,
        end_date: str,
        department_id: Optional[str] = None,
        year_id: Optional[str] = None,
    ) -> list[AttendanceEntry]:
        """Entries with ``start_date <= date <= end_date``.

        Plain string comparison: correct only for zero-padded ``YYYY-MM-DD``.
        """

        matches = (e for e in self.list_entries() if start_date <= e.date <= end_date)
        return _narrow(matches, department_id, year_id)

    def get_processed_records(
        self,
        start_date: str,
        end_date: str,
        department_id: str,
        year_id: str,
    ) -> list[AttendanceRecord]:
        """Pivot the range into one ``AttendanceRecord`` per roster student.

        The roster decides who appears; students with no entries get an empty
        ``periods`` map. Periods are keyed without the date, so a later entry
        for the same period number replaces an earlier one.
        """

        entries = self.get_by_date_range(start_date, end_date, department_id, year_id)
        roster = self._students.list_by_department_and_year(department_id, year_id)

        by_student: dict[str, dict[int, str]] = {}
        for e in entries:
            by_student.setdefault(e.student_id, {})[e.period] = e.status

        return [AttendanceRecord(student=s, periods=by_student.get(s.id, {})) for s in roster]

    def get_sheet(self, date: str, period: int, department_id: str, year_id: str) -> list[SheetRow]:
        roster = self._students.list_by_department_and_year(department_id, year_id)
        existing = {e.student_id: e.status for e in self.get_by_date_and_period(date, period, department_id, year_id)}

        rows = []
        for s in roster:
            status = existing.get(s.id)
            rows.append(
                SheetRow(
                    student=s,
                    status=status or AttendanceStatus.ABSENT.value,
                    marked=status is not None,
                )
            )
        return rows

    def count_by_status(self, start_date: str, end_date: str) -> StatusCounts:
        """Raw entry counts across all departments for the dashboard."""

        return count_statuses(e.status for e in self.get_by_date_range(start_date, end_date))
