from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import current_month_dates, current_week_dates, format_iso_date, today_local
from ..common.validators import optional_str, parse_period, require_non_empty
from ..common.web import canonical_date, login_required, request_payload
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _sheet_filters(source: dict) -> tuple[str, int, str, str]:
        return (
            canonical_date(source.get("date"), "date"),
            parse_period(source.get("period", 1)),
            require_non_empty(source.get("departmentId"), "Department"),
            require_non_empty(source.get("yearId"), "Academic year"),
        )

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @login_required
    def attendance_mark():
        data = request_payload()
        attendance.mark_attendance(
            require_non_empty(data.get("studentId"), "Student"),
            canonical_date(data.get("date"), "date"),
            parse_period(data.get("period")),
            data.get("status"),
            optional_str(data.get("departmentId")) or "",
            optional_str(data.get("yearId")) or "",
        )
        return jsonify({"success": True})

    @app.route("/api/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    @login_required
    def attendance_sheet():
        date, period, department_id, year_id = _sheet_filters(request.args)
        rows = attendance.get_sheet(date, period, department_id, year_id)
        return jsonify(
            {
                "date": date,
                "period": period,
                "departmentId": department_id,
                "yearId": year_id,
                "rows": [r.to_dict() for r in rows],
            }
        )

    @app.route("/api/attendance/sheet", methods=["POST"], endpoint="attendance_sheet_save")
    @login_required
    def attendance_sheet_save():
        data = request_payload()
        date, period, department_id, year_id = _sheet_filters(data)
        statuses = data.get("statuses") or {}
        if not isinstance(statuses, dict):
            raise ValidationError("statuses must map student ids to a status")

        saved = attendance.mark_bulk(
            date=date,
            period=period,
            department_id=department_id,
            year_id=year_id,
            statuses=statuses,
        )
        return jsonify({"success": True, "saved": saved, "message": "Attendance saved successfully"})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_query")
    @login_required
    def attendance_query():
        department_id = request.args.get("departmentId") or None
        year_id = request.args.get("yearId") or None

        if request.args.get("date"):
            entries = attendance.get_by_date_and_period(
                canonical_date(request.args.get("date"), "date"),
                parse_period(request.args.get("period", 1)),
                department_id,
                year_id,
            )
        else:
            week = current_week_dates()
            entries = attendance.get_by_date_range(
                canonical_date(request.args.get("startDate") or week.start_date, "startDate"),
                canonical_date(request.args.get("endDate") or week.end_date, "endDate"),
                department_id,
                year_id,
            )
        return jsonify([e.to_dict() for e in entries])

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    def dashboard_stats():
        selected = request.args.get("range", "today")
        if selected == "week":
            window = current_week_dates()
            start, end = window.start_date, window.end_date
        elif selected == "month":
            window = current_month_dates()
            start, end = window.start_date, window.end_date
        else:
            selected = "today"
            start = end = format_iso_date(today_local())

        stats = attendance.count_by_status(start, end)
        return jsonify(
            {
                "range": selected,
                "startDate": start,
                "endDate": end,
                "departments": len(container.departments.list_all()),
                "students": len(container.students.list_all()),
                "stats": stats.to_dict(),
            }
        )
