from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_user_id, json_error, login_required, parse_enum
from ..container import Container
from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/mine", endpoint="payroll_mine")
    @login_required
    def payroll_mine():
        records = container.payroll_service.list_records(user_id=current_user_id())
        return jsonify([p.to_dict() for p in records])

    @app.route("/api/payroll", endpoint="payroll_summary")
    @admin_required
    def payroll_summary():
        status_arg = request.args.get("status")
        try:
            status = parse_enum(PayrollStatus, status_arg, "status") if status_arg and status_arg.upper() != "ALL" else None
        except ValidationError as e:
            return json_error(str(e))

        summary = container.payroll_service.build_summary(status=status)
        return jsonify(
            {
                "rows": summary.rows,
                "total_amount": summary.total_amount,
                "paid_count": summary.paid_count,
                "processing_count": summary.processing_count,
            }
        )
