from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_user_id, json_body, json_error, login_required
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/announcements", endpoint="announcements_list")
    @login_required
    def announcements_list():
        limit = request.args.get("limit", type=int)
        if limit:
            items = container.announcement_service.latest(limit)
        else:
            items = container.announcement_service.list_announcements()
        return jsonify([a.to_dict() for a in items])

    @app.route("/api/announcements", methods=["POST"], endpoint="announcements_create")
    @admin_required
    def announcements_create():
        data = json_body()
        try:
            announcement = container.announcement_service.create(
                title=str(data.get("title", "")),
                content=str(data.get("content", "")),
                author_id=current_user_id(),
                is_ai_generated=bool(data.get("is_ai_generated")),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Posting announcement failed")
            return json_error("System error while posting", 500)
        return jsonify({"success": True, "announcement": announcement.to_dict()}), 201

    @app.route("/api/announcements/draft", methods=["POST"], endpoint="announcements_draft")
    @admin_required
    def announcements_draft():
        data = json_body()
        topic = str(data.get("topic", "")).strip()
        if not topic:
            return json_error("topic is required")
        text = container.announcement_service.draft(topic=topic, tone=str(data.get("tone") or "professional"))
        return jsonify({"success": True, "content": text})
