from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats/today", endpoint="stats_today")
    @admin_required
    def stats_today():
        return jsonify(container.stats_service.today_stats().to_dict())

    @app.route("/api/revision", endpoint="revision")
    @login_required
    def revision():
        """Clients poll this and re-query their views when it moves."""
        return jsonify({"revision": container.revision.revision})
