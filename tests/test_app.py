from __future__ import annotations

import io

import pytest
from openpyxl import load_workbook

from src.gasc_attendance.gasc_attendance.container import build_container
from src.gasc_attendance.gasc_attendance.main import create_app
from src.gasc_attendance.gasc_attendance.storage.memory_store import InMemoryRecordStore


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(store=InMemoryRecordStore())
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in(client):
    resp = client.post("/api/auth/login", json={"email": "admin@gasc.edu", "password": "pw"})
    assert resp.status_code == 200
    return client


def test_endpoints_require_sign_in(client):
    resp = client.get("/api/departments")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_blank_login_is_rejected(client):
    resp = client.post("/api/auth/login", json={"email": "", "password": ""})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid email or password"


def test_me_and_logout(signed_in):
    assert signed_in.get("/api/auth/me").get_json()["user"]["name"] == "Admin User"

    signed_in.post("/api/auth/logout")

    assert signed_in.get("/api/auth/me").status_code == 401


def test_department_crud(signed_in):
    assert len(signed_in.get("/api/departments").get_json()) == 4

    created = signed_in.post("/api/departments", json={"name": "Physics", "code": "ph"}).get_json()["department"]
    assert created["code"] == "PH"

    resp = signed_in.patch(f"/api/departments/{created['id']}", json={"name": "Applied Physics"})
    assert resp.get_json()["department"] == {"id": created["id"], "name": "Applied Physics", "code": "PH"}

    assert signed_in.patch("/api/departments/missing", json={"name": "X"}).status_code == 404


def test_department_requires_name(signed_in):
    resp = signed_in.post("/api/departments", json={"code": "X"})
    assert resp.status_code == 400


def test_student_filters(signed_in):
    assert [s["id"] for s in signed_in.get("/api/students?departmentId=1&yearId=2").get_json()] == ["1", "2"]
    assert [s["id"] for s in signed_in.get("/api/students?departmentId=2").get_json()] == ["3"]
    assert len(signed_in.get("/api/students").get_json()) == 3


def test_take_attendance_flow(signed_in):
    sheet = signed_in.get("/api/attendance/sheet?date=2024-03-04&period=1&departmentId=1&yearId=2").get_json()
    assert [r["status"] for r in sheet["rows"]] == ["absent", "absent"]

    resp = signed_in.post(
        "/api/attendance/sheet",
        json={"date": "2024-03-04", "period": 1, "departmentId": "1", "yearId": "2", "statuses": {"1": "present"}},
    )
    assert resp.get_json()["saved"] == 2

    sheet = signed_in.get("/api/attendance/sheet?date=2024-03-04&period=1&departmentId=1&yearId=2").get_json()
    assert [(r["status"], r["marked"]) for r in sheet["rows"]] == [("present", True), ("absent", True)]


def test_mark_and_query(signed_in):
    signed_in.post(
        "/api/attendance/mark",
        json={"studentId": "1", "date": "2024-03-04", "period": "2", "status": "late", "departmentId": "1", "yearId": "2"},
    )

    entries = signed_in.get("/api/attendance?startDate=2024-03-01&endDate=2024-03-31").get_json()
    assert [(e["studentId"], e["period"], e["status"]) for e in entries] == [("1", 2, "late")]

    by_period = signed_in.get("/api/attendance?date=2024-03-04&period=2&departmentId=1").get_json()
    assert len(by_period) == 1


def test_mark_rejects_non_iso_date(signed_in):
    resp = signed_in.post(
        "/api/attendance/mark",
        json={"studentId": "1", "date": "03/04/2024", "period": 1, "status": "late", "departmentId": "1", "yearId": "2"},
    )
    assert resp.status_code == 400


def test_report_and_export(signed_in):
    signed_in.post(
        "/api/attendance/mark",
        json={"studentId": "1", "date": "2024-03-04", "period": 1, "status": "present", "departmentId": "1", "yearId": "2"},
    )

    report = signed_in.get("/api/reports?startDate=2024-03-04&endDate=2024-03-05&departmentId=1&yearId=2").get_json()
    assert report["stats"]["present"] == 1
    assert report["dateRange"] == ["2024-03-04", "2024-03-05"]

    resp = signed_in.get("/api/reports/export?startDate=2024-03-04&endDate=2024-03-05&departmentId=1&yearId=2")
    assert resp.status_code == 200
    assert "Attendance_CS_Second Year_" in resp.headers["Content-Disposition"]

    ws = load_workbook(io.BytesIO(resp.data))["Computer Science - Second Year"]
    assert ws.max_column == 2 + 2 * 5 + 4
    assert ws["C3"].value == "present"
    assert ws["H3"].value == "present"


def test_export_unknown_department_is_404(signed_in):
    resp = signed_in.get("/api/reports/export?startDate=2024-03-04&endDate=2024-03-05&departmentId=9&yearId=2")
    assert resp.status_code == 404


def test_dashboard_stats(signed_in):
    data = signed_in.get("/api/dashboard/stats?range=month").get_json()

    assert data["range"] == "month"
    assert data["departments"] == 4
    assert data["students"] == 3
    assert data["stats"]["total"] == 0


def test_numeric_ids_are_accepted(signed_in):
    resp = signed_in.post(
        "/api/attendance/mark",
        json={"studentId": 1, "date": "2024-03-04", "period": 1, "status": "late", "departmentId": 1, "yearId": 2},
    )
    assert resp.status_code == 200

    resp = signed_in.post(
        "/api/attendance/sheet",
        json={"date": "2024-03-04", "period": 2, "departmentId": 1, "yearId": 2, "statuses": {"1": "present"}},
    )
    assert resp.status_code == 200
    assert resp.get_json()["saved"] == 2

    entries = signed_in.get("/api/attendance?date=2024-03-04&period=1&departmentId=1&yearId=2").get_json()
    assert [(e["studentId"], e["status"]) for e in entries] == [("1", "late")]


def test_non_scalar_id_is_a_validation_error(signed_in):
    resp = signed_in.post(
        "/api/attendance/mark",
        json={"studentId": {"id": 1}, "date": "2024-03-04", "period": 1, "status": "late"},
    )
    assert resp.status_code == 400


def test_export_with_slash_in_department_name(signed_in):
    created = signed_in.post("/api/departments", json={"name": "Arts/Science", "code": "AS"}).get_json()["department"]

    resp = signed_in.get(f"/api/reports/export?startDate=2024-03-04&endDate=2024-03-05&departmentId={created['id']}&yearId=1")

    assert resp.status_code == 200
    assert load_workbook(io.BytesIO(resp.data)).sheetnames == ["Arts-Science - First Year"]


def test_export_of_overlong_range_is_400(signed_in):
    resp = signed_in.get("/api/reports/export?startDate=2000-01-01&endDate=2020-01-01&departmentId=1&yearId=2")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
