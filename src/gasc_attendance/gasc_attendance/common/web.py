from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .datetime_utils import format_iso_date, parse_iso_date


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def request_payload() -> dict[str, Any]:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def canonical_date(value: Optional[str], field_name: str) -> str:
    """Normalize a client date to zero-padded YYYY-MM-DD."""
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return format_iso_date(parse_iso_date(str(value).strip()))
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return json_error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return json_error(str(e), 401)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return json_error(str(e), 404)
