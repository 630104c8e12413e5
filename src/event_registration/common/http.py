from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def json_object() -> dict:
    """Request body as a JSON object; a missing or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Dados inválidos")
    return data


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        return jsonify({"error": str(exc)}), status_for(exc)

    @app.errorhandler(InfrastructureError)
    def _infrastructure_error(exc: InfrastructureError):
        logger.error("Falha de infraestrutura: %s", exc, exc_info=exc)
        return jsonify({"error": "Erro interno ao processar a requisição"}), 500

    @app.errorhandler(Exception)
    def _unexpected_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Erro inesperado: %s", exc)
        return jsonify({"error": "Erro interno ao processar a requisição"}), 500
