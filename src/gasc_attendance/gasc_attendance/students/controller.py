from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_str, require_non_empty
from ..common.web import json_error, login_required, request_payload
from ..container import Container
from .model import StudentPatch


def register(app: Flask, container: Container) -> None:
    registry = container.students

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    @login_required
    def students_list():
        department_id = request.args.get("departmentId") or None
        year_id = request.args.get("yearId") or None

        if department_id and year_id:
            students = registry.list_by_department_and_year(department_id, year_id)
        elif department_id:
            students = registry.list_by_department(department_id)
        else:
            students = registry.list_all()
            if year_id:
                students = [s for s in students if s.year_id == year_id]
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    @login_required
    def students_create():
        data = request_payload()
        student = registry.add(
            name=require_non_empty(data.get("name"), "Student name"),
            reg_number=require_non_empty(data.get("regNumber"), "Registration number"),
            department_id=require_non_empty(data.get("departmentId"), "Department"),
            year_id=require_non_empty(data.get("yearId"), "Academic year"),
            email=optional_str(data.get("email")),
            phone_number=optional_str(data.get("phoneNumber")),
        )
        return jsonify({"success": True, "student": student.to_dict()}), 201

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="students_detail")
    @login_required
    def students_detail(student_id: str):
        student = registry.get_by_id(student_id)
        if not student:
            return json_error("Student not found", 404)
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["PATCH", "PUT"], endpoint="students_update")
    @login_required
    def students_update(student_id: str):
        data = request_payload()
        registry.update(
            student_id,
            StudentPatch(
                name=optional_str(data.get("name")),
                reg_number=optional_str(data.get("regNumber")),
                department_id=optional_str(data.get("departmentId")),
                year_id=optional_str(data.get("yearId")),
                email=optional_str(data.get("email")),
                phone_number=optional_str(data.get("phoneNumber")),
            ),
        )
        student = registry.get_by_id(student_id)
        if not student:
            return json_error("Student not found", 404)
        return jsonify({"success": True, "student": student.to_dict()})
