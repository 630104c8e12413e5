from __future__ import annotations

from flask import Flask, jsonify

from ..admins.decorators import admin_required
from ..common.http import json_object
from ..container import Container
from ..registrations.controller import csv_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/avaliacoes", methods=["POST"], endpoint="submit_evaluation")
    def submit_evaluation():
        container.evaluation_service.submit(json_object())
        return jsonify({"message": "Avaliação enviada com sucesso! Obrigado pelo seu feedback."}), 201

    @app.route("/api/avaliacoes/stats", methods=["GET"], endpoint="evaluation_stats")
    @admin_required
    def evaluation_stats():
        return jsonify(container.evaluation_service.stats())

    @app.route("/api/avaliacoes/export", methods=["GET"], endpoint="export_evaluations")
    @admin_required
    def export_evaluations():
        return csv_response(app, container.evaluation_service.export_csv(), filename="avaliacoes_evento.csv")
