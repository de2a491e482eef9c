"""Flask glue shared by the feature controllers."""

from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def json_error(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)

        if session.get("role") != Role.ADMIN.value:
            return json_error("Admins only", 403)

        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> str:
    return str(session["user_id"])


def current_role() -> Role:
    return Role(session["role"])


def json_body() -> dict:
    """Request JSON object; any other payload reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_date(data: dict, field: str) -> date:
    value = str(data.get(field) or "").strip()
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date")


def optional_date(data: dict, field: str) -> Optional[date]:
    if not data.get(field):
        return None
    return require_date(data, field)


def parse_enum(enum_cls, value: Any, field: str):
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field} must be one of: {allowed}")
