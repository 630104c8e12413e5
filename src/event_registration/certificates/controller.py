from __future__ import annotations

from flask import Flask, jsonify

from ..admins.decorators import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/certificados/stats", methods=["GET"], endpoint="certificate_stats")
    @admin_required
    def certificate_stats():
        return jsonify(container.certificate_service.stats())
