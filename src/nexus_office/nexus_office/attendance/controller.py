from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_role, current_user_id, json_body, json_error, login_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        data = json_body()
        try:
            record = container.attendance_service.check_in(current_user_id(), is_remote=bool(data.get("is_remote")))
        except Exception:
            logger.exception("Check-in failed")
            return json_error("System error during check-in", 500)
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        try:
            record = container.attendance_service.check_out(current_user_id())
        except ValidationError as e:
            logger.info("Checkout rejected for %s: %s", current_user_id(), e)
            return json_error(str(e))
        except Exception:
            logger.exception("Checkout failed")
            return json_error("System error during checkout", 500)
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/attendance", endpoint="attendance_list")
    @login_required
    def attendance_list():
        user_id = current_user_id()
        if current_role() == Role.ADMIN:
            user_id = request.args.get("user_id") or None
        records = container.attendance_service.list_records(user_id=user_id)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/today", endpoint="attendance_today")
    @login_required
    def attendance_today():
        record = container.attendance_service.get_today_record(current_user_id())
        return jsonify({"record": record.to_dict() if record else None})

    @app.route("/api/attendance/activity", endpoint="attendance_activity")
    @admin_required
    def attendance_activity():
        items = container.attendance_service.recent_activity()
        return jsonify([a.to_dict() for a in items])
