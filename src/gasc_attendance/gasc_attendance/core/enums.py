from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role attached to the signed-in profile."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Per-period attendance marks.

    Stored as the plain string value; the engine does not reject other values.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class Collection(str, Enum):
    """Named slots of the record store."""

    USERS = "users"
    DEPARTMENTS = "departments"
    STUDENTS = "students"
    ATTENDANCE = "attendance"
