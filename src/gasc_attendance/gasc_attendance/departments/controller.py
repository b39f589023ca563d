from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import optional_str, require_non_empty
from ..common.web import json_error, login_required, request_payload
from ..container import Container
from .model import ACADEMIC_YEARS, DepartmentPatch


def register(app: Flask, container: Container) -> None:
    registry = container.departments

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    @login_required
    def departments_list():
        return jsonify([d.to_dict() for d in registry.list_all()])

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    @login_required
    def departments_create():
        data = request_payload()
        department = registry.add(
            name=require_non_empty(data.get("name"), "Department name"),
            code=require_non_empty(data.get("code"), "Department code").upper(),
        )
        return jsonify({"success": True, "department": department.to_dict()}), 201

    @app.route("/api/departments/<department_id>", methods=["GET"], endpoint="departments_detail")
    @login_required
    def departments_detail(department_id: str):
        department = registry.get_by_id(department_id)
        if not department:
            return json_error("Department not found", 404)
        return jsonify(department.to_dict())

    @app.route("/api/departments/<department_id>", methods=["PATCH", "PUT"], endpoint="departments_update")
    @login_required
    def departments_update(department_id: str):
        data = request_payload()
        code = optional_str(data.get("code"))
        registry.update(
            department_id,
            DepartmentPatch(name=optional_str(data.get("name")), code=code.upper() if code else None),
        )
        department = registry.get_by_id(department_id)
        if not department:
            return json_error("Department not found", 404)
        return jsonify({"success": True, "department": department.to_dict()})

    @app.route("/api/years", methods=["GET"], endpoint="years_list")
    @login_required
    def years_list():
        return jsonify([y.to_dict() for y in ACADEMIC_YEARS])
