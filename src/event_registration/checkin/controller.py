from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..admins.decorators import admin_required
from ..common.http import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin", methods=["POST"], endpoint="checkin")
    @admin_required
    def checkin():
        data = json_object()
        result = container.checkin_service.check_in(str(data.get("cpf") or ""), str(data.get("dia") or ""))
        message = "Check-in já registrado" if result.already_checked_in else "Check-in realizado com sucesso"
        return jsonify({**result.to_dict(), "message": message})

    @app.route("/api/checkin/qr/<cpf>", methods=["GET"], endpoint="checkin_qr_image")
    def checkin_qr_image(cpf: str):
        png = container.checkin_service.qr_code_png(cpf)
        return send_file(io.BytesIO(png), mimetype="image/png")
