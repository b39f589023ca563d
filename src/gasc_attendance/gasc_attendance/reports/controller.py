from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import current_week_dates
from ..common.validators import require_non_empty
from ..common.web import canonical_date, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _report_filters() -> dict[str, str]:
        week = current_week_dates()
        return {
            "start_date": canonical_date(request.args.get("startDate") or week.start_date, "startDate"),
            "end_date": canonical_date(request.args.get("endDate") or week.end_date, "endDate"),
            "department_id": require_non_empty(request.args.get("departmentId"), "Department"),
            "year_id": require_non_empty(request.args.get("yearId"), "Academic year"),
        }

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    @login_required
    def report():
        data = reports.build_report(**_report_filters())
        return jsonify(data.to_dict())

    @app.route("/api/reports/export", methods=["GET"], endpoint="reports_export")
    @login_required
    def report_export():
        exported = reports.export(**_report_filters())
        return send_file(
            io.BytesIO(exported.content),
            mimetype=exported.mimetype,
            as_attachment=True,
            download_name=exported.filename,
        )
