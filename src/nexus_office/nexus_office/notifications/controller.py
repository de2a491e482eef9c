from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_role, current_user_id, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", endpoint="notifications_list")
    @login_required
    def notifications_list():
        items = container.notification_service.list_for(current_user_id(), current_role())
        return jsonify(
            {
                "unread": sum(1 for n in items if not n.read),
                "items": [n.to_dict() for n in items],
            }
        )

    @app.route("/api/notifications/<notification_id>/read", methods=["POST"], endpoint="notifications_read")
    @login_required
    def notifications_read(notification_id: str):
        container.notification_service.mark_read(notification_id)
        return jsonify({"success": True})

    @app.route("/api/notifications/read-all", methods=["POST"], endpoint="notifications_read_all")
    @login_required
    def notifications_read_all():
        marked = container.notification_service.mark_all_read(current_user_id(), current_role())
        return jsonify({"success": True, "marked": len(marked)})
