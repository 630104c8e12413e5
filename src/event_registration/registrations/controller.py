from __future__ import annotations

from flask import Flask, jsonify

from ..admins.decorators import admin_required
from ..common.http import json_object
from ..container import Container


def csv_response(app: Flask, payload: bytes, *, filename: str):
    return app.response_class(
        payload,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/inscricoes", methods=["POST"], endpoint="create_registration")
    def create_registration():
        data = json_object()
        result = container.registration_service.register(data)
        return jsonify({"id": result.registration_id, "message": "Inscrição realizada com sucesso!"}), 201

    @app.route("/api/inscricoes/vagas", methods=["GET"], endpoint="registration_vacancy")
    def registration_vacancy():
        return jsonify(container.capacity_service.get_vacancy())

    @app.route("/api/inscricoes", methods=["GET"], endpoint="list_registrations")
    @admin_required
    def list_registrations():
        return jsonify(container.registration_service.list_all())

    @app.route("/api/inscricoes/stats", methods=["GET"], endpoint="registration_stats")
    @admin_required
    def registration_stats():
        return jsonify(container.registration_service.stats())

    @app.route("/api/inscricoes/export", methods=["GET"], endpoint="export_registrations")
    @admin_required
    def export_registrations():
        return csv_response(app, container.registration_service.export_csv(), filename="participantes.csv")

    @app.route("/api/inscricoes/<int:registration_id>/presenca", methods=["PATCH"], endpoint="toggle_attendance")
    @admin_required
    def toggle_attendance(registration_id: int):
        return jsonify(container.registration_service.toggle_attendance(registration_id))

    @app.route("/api/inscricoes/<int:registration_id>", methods=["DELETE"], endpoint="delete_registration")
    @admin_required
    def delete_registration(registration_id: int):
        container.registration_service.delete(registration_id)
        return jsonify({"message": "Inscrição excluída com sucesso"})
