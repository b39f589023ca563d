from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import json_error, request_payload
from ..container import Container
from .model import User


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    def _start_session(user: User):
        session["user_id"] = user.id
        session["name"] = user.name
        session["role"] = user.role.value
        return jsonify({"success": True, "user": user.to_dict()})

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request_payload()
        if data.get("provider") == "google":
            user = auth.login_with_google()
        elif "phoneNumber" in data:
            user = auth.login_with_phone(data.get("phoneNumber", ""), data.get("code", ""))
        else:
            user = auth.login(data.get("email", ""), data.get("password", ""))
        return _start_session(user)

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = request_payload()
        if data.get("phoneNumber") and not data.get("email"):
            user = auth.signup_with_phone(data.get("name", ""), data.get("phoneNumber", ""))
        else:
            user = auth.signup(data.get("name", ""), data.get("email", ""), data.get("password", ""))
        return _start_session(user)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        auth.logout()
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    def me():
        if "user_id" not in session:
            return json_error("Not signed in", 401)
        user = auth.current_user()
        if not user:
            session.clear()
            return json_error("Not signed in", 401)
        return jsonify({"success": True, "user": user.to_dict()})
