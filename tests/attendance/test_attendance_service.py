from __future__ import annotations

from src.gasc_attendance.gasc_attendance.core.enums import Collection
from src.gasc_attendance.gasc_attendance.students.model import StudentPatch


def _keys(entries):
    return [(e.student_id, e.date, e.period) for e in entries]


def test_first_mark_creates_entry(store, attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")

    assert store.load(Collection.ATTENDANCE) == [
        {
            "id": "id-1",
            "studentId": "1",
            "date": "2024-03-04",
            "period": 1,
            "status": "present",
            "departmentId": "1",
            "yearId": "2",
        }
    ]


def test_second_mark_for_same_key_overwrites_status(attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    attendance.mark_attendance("1", "2024-03-04", 1, "late", "1", "2")

    entries = attendance.list_entries()
    assert len(entries) == 1
    assert entries[0].status == "late"
    assert entries[0].id == "id-1"


def test_upsert_keeps_original_department_and_year(attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    attendance.mark_attendance("1", "2024-03-04", 1, "absent", "9", "9")

    (entry,) = attendance.list_entries()
    assert (entry.status, entry.department_id, entry.year_id) == ("absent", "1", "2")


def test_composite_key_stays_unique(attendance):
    marks = [
        ("1", "2024-03-04", 1, "present"),
        ("1", "2024-03-04", 2, "present"),
        ("2", "2024-03-04", 1, "late"),
        ("1", "2024-03-05", 1, "absent"),
        ("1", "2024-03-04", 1, "excused"),
        ("2", "2024-03-04", 1, "present"),
    ]
    for student_id, date, period, status in marks:
        attendance.mark_attendance(student_id, date, period, status, "1", "2")

    keys = _keys(attendance.list_entries())
    assert len(keys) == len(set(keys)) == 4


def test_malformed_input_is_stored_as_is(attendance):
    attendance.mark_attendance("1", "4/3/2024", -2, "sleeping", "1", "2")

    (entry,) = attendance.list_entries()
    assert (entry.date, entry.period, entry.status) == ("4/3/2024", -2, "sleeping")


def test_get_by_date_and_period_filters_and_keeps_storage_order(attendance):
    attendance.mark_attendance("2", "2024-03-04", 1, "present", "1", "2")
    attendance.mark_attendance("3", "2024-03-04", 1, "absent", "2", "1")
    attendance.mark_attendance("1", "2024-03-04", 1, "late", "1", "2")
    attendance.mark_attendance("1", "2024-03-04", 2, "late", "1", "2")

    assert _keys(attendance.get_by_date_and_period("2024-03-04", 1)) == [
        ("2", "2024-03-04", 1),
        ("3", "2024-03-04", 1),
        ("1", "2024-03-04", 1),
    ]
    assert [e.student_id for e in attendance.get_by_date_and_period("2024-03-04", 1, "1", "2")] == ["2", "1"]
    assert [e.student_id for e in attendance.get_by_date_and_period("2024-03-04", 1, "", "1")] == ["3"]


def test_date_range_is_inclusive_and_excludes_next_month(attendance):
    for date in ("2023-12-31", "2024-01-01", "2024-01-15", "2024-01-31", "2024-02-01"):
        attendance.mark_attendance("1", date, 1, "present", "1", "2")

    dates = [e.date for e in attendance.get_by_date_range("2024-01-01", "2024-01-31")]
    assert dates == ["2024-01-01", "2024-01-15", "2024-01-31"]


def test_date_range_compares_strings(attendance):
    attendance.mark_attendance("1", "2024-1-5", 1, "present", "1", "2")

    # "2024-1-5" sorts after "2024-01-31" as text, so it falls outside January.
    assert attendance.get_by_date_range("2024-01-01", "2024-01-31") == []


def test_date_range_narrows_by_department_and_year(attendance):
    attendance.mark_attendance("1", "2024-01-10", 1, "present", "1", "2")
    attendance.mark_attendance("3", "2024-01-10", 1, "present", "2", "1")

    assert [e.student_id for e in attendance.get_by_date_range("2024-01-01", "2024-01-31", "2")] == ["3"]
    assert [e.student_id for e in attendance.get_by_date_range("2024-01-01", "2024-01-31", None, "2")] == ["1"]


def test_processed_records_cover_whole_roster_without_entries(attendance):
    records = attendance.get_processed_records("2024-03-04", "2024-03-10", "1", "2")

    assert [r.student.id for r in records] == ["1", "2"]
    assert all(r.periods == {} for r in records)


def test_processed_records_pivot_by_period(attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    attendance.mark_attendance("1", "2024-03-04", 3, "late", "1", "2")
    attendance.mark_attendance("2", "2024-03-04", 2, "excused", "1", "2")

    by_id = {r.student.id: r.periods for r in attendance.get_processed_records("2024-03-04", "2024-03-04", "1", "2")}
    assert by_id == {"1": {1: "present", 3: "late"}, "2": {2: "excused"}}


def test_processed_records_exclude_students_outside_roster(students, attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    students.update("1", StudentPatch(year_id="3"))

    records = attendance.get_processed_records("2024-03-04", "2024-03-04", "1", "2")
    assert [r.student.id for r in records] == ["2"]


def test_processed_records_collapse_dates_last_write_wins(attendance):
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")
    attendance.mark_attendance("1", "2024-03-05", 1, "absent", "1", "2")

    records = attendance.get_processed_records("2024-03-04", "2024-03-05", "1", "2")
    john = next(r for r in records if r.student.id == "1")
    assert john.periods == {1: "absent"}


def test_collapse_follows_storage_order_not_date_order(attendance):
    attendance.mark_attendance("1", "2024-03-05", 1, "absent", "1", "2")
    attendance.mark_attendance("1", "2024-03-04", 1, "present", "1", "2")

    records = attendance.get_processed_records("2024-03-04", "2024-03-05", "1", "2")
    assert records[0].periods[1] == "present"
