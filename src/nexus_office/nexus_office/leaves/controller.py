from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import (
    admin_required,
    current_role,
    current_user_id,
    json_body,
    json_error,
    login_required,
    parse_enum,
    require_date,
)
from ..container import Container
from ..core.enums import LeaveType, RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", endpoint="leaves_list")
    @login_required
    def leaves_list():
        user_id = None if current_role() == Role.ADMIN else current_user_id()
        return jsonify([r.to_dict() for r in container.leave_service.list_requests(user_id=user_id)])

    @app.route("/api/leaves", methods=["POST"], endpoint="leaves_create")
    @login_required
    def leaves_create():
        data = json_body()
        try:
            req = container.leave_service.create(
                user_id=current_user_id(),
                user_name=str(session.get("name") or ""),
                start_date=require_date(data, "start_date"),
                end_date=require_date(data, "end_date"),
                reason=str(data.get("reason", "")),
                leave_type=parse_enum(LeaveType, data.get("type", "VACATION"), "type"),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Leave request failed")
            return json_error("System error while filing the request", 500)
        return jsonify({"success": True, "request": req.to_dict()}), 201

    def _decide(request_id: str, status: RequestStatus):
        try:
            req = container.leave_service.update_status(request_id, status, current_role=current_role())
        except AuthorizationError as e:
            return json_error(str(e), 403)
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Leave decision failed")
            return json_error("System error while updating the request", 500)
        # Unknown ids are not an error.
        return jsonify({"success": True, "request": req.to_dict() if req else None})

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="leaves_approve")
    @admin_required
    def leaves_approve(request_id: str):
        return _decide(request_id, RequestStatus.APPROVED)

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="leaves_reject")
    @admin_required
    def leaves_reject(request_id: str):
        return _decide(request_id, RequestStatus.REJECTED)
