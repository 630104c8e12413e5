from __future__ import annotations

from flask import Flask, jsonify, request

from ..admins.decorators import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        # Public: the registration page shows event details.
        return jsonify(container.settings_service.public_settings())

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    def update_settings():
        container.settings_service.update(request.get_json(silent=True))
        return jsonify({"message": "Configurações atualizadas com sucesso"})
