from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.web import admin_required, current_user_id, json_body, json_error, login_required, parse_enum
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(str(data.get("email", "")), str(data.get("password", "")))
        except AuthenticationError as e:
            return json_error(str(e), 401)

        session.clear()
        session["user_id"] = user.user_id
        session["name"] = user.name
        session["role"] = user.role.value
        return jsonify({"success": True, "user": user.public_dict()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        user = container.user_service.get_user(current_user_id())
        if not user:
            session.clear()
            return json_error("Account no longer exists", 401)
        return jsonify(user.public_dict())

    @app.route("/api/users", endpoint="users_list")
    @login_required
    def users_list():
        role_arg = request.args.get("role")
        try:
            role = parse_enum(Role, role_arg, "role") if role_arg else None
        except ValidationError as e:
            return json_error(str(e))
        return jsonify([u.public_dict() for u in container.user_service.list_users(role=role)])

    @app.route("/api/users", methods=["POST"], endpoint="users_add")
    @admin_required
    def users_add():
        data = json_body()
        try:
            user = container.user_service.add_employee(
                name=str(data.get("name", "")),
                email=str(data.get("email", "")),
                job_title=data.get("job_title"),
                department=data.get("department"),
                password=data.get("password"),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Adding employee failed")
            return json_error("System error while adding the employee", 500)
        return jsonify({"success": True, "user": user.public_dict()}), 201
