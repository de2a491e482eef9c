from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import current_user_id, json_body, json_error, login_required, optional_date, parse_enum
from ..container import Container
from ..core.enums import TaskPriority, TaskStatus
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", endpoint="tasks_board")
    @login_required
    def tasks_board():
        board = container.task_service.board(current_user_id())
        return jsonify({status.value: [t.to_dict() for t in tasks] for status, tasks in board.items()})

    @app.route("/api/tasks", methods=["POST"], endpoint="tasks_create")
    @login_required
    def tasks_create():
        data = json_body()
        try:
            task = container.task_service.create(
                user_id=current_user_id(),
                title=str(data.get("title", "")),
                priority=parse_enum(TaskPriority, data.get("priority", "MEDIUM"), "priority"),
                description=data.get("description"),
                due_date=optional_date(data, "due_date"),
            )
        except ValidationError as e:
            return json_error(str(e))
        return jsonify({"success": True, "task": task.to_dict()}), 201

    @app.route("/api/tasks/<task_id>", methods=["PATCH"], endpoint="tasks_update")
    @login_required
    def tasks_update(task_id: str):
        try:
            status = parse_enum(TaskStatus, json_body().get("status", ""), "status")
        except ValidationError as e:
            return json_error(str(e))
        updated = container.task_service.update_status(task_id, status)
        return jsonify({"success": True, "updated": updated})

    @app.route("/api/tasks/<task_id>", methods=["DELETE"], endpoint="tasks_delete")
    @login_required
    def tasks_delete(task_id: str):
        deleted = container.task_service.delete(task_id)
        return jsonify({"success": True, "deleted": deleted})
