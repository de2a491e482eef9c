from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/documents", endpoint="documents_list")
    @login_required
    def documents_list():
        return jsonify([d.to_dict() for d in container.documents_repo.list_all()])
