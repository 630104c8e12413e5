from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_object
from ..container import Container
from .decorators import admin_required


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_object()
        s_admin = container.auth_service.authenticate(str(data.get("email") or ""), str(data.get("senha") or ""))

        session.clear()
        session.permanent = True
        session["admin_id"] = s_admin.admin_id
        session["name"] = s_admin.full_name
        session["email"] = s_admin.email

        return jsonify({"admin": {"id": s_admin.admin_id, "nome": s_admin.full_name, "email": s_admin.email}})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Sessão encerrada"})

    @app.route("/api/admins", methods=["GET"], endpoint="list_admins")
    @admin_required
    def list_admins():
        return jsonify(container.admin_service.list_admins())

    @app.route("/api/admins", methods=["POST"], endpoint="create_admin")
    @admin_required
    def create_admin():
        data = json_object()
        admin = container.admin_service.create_admin(
            full_name=data.get("nome"),
            email=data.get("email"),
            password=data.get("senha"),
        )
        return (
            jsonify(
                {
                    "id": admin.admin_id,
                    "nome": admin.full_name,
                    "email": admin.email,
                    "message": "Administrador criado com sucesso",
                }
            ),
            201,
        )

    @app.route("/api/admins/<int:admin_id>", methods=["PUT"], endpoint="update_admin")
    @admin_required
    def update_admin(admin_id: int):
        data = json_object()
        container.admin_service.update_admin(
            admin_id,
            full_name=data.get("nome"),
            email=data.get("email"),
            password=data.get("senha"),
        )
        return jsonify({"message": "Administrador atualizado com sucesso"})

    @app.route("/api/admins/<int:admin_id>", methods=["DELETE"], endpoint="delete_admin")
    @admin_required
    def delete_admin(admin_id: int):
        container.admin_service.delete_admin(current_admin_id=int(session["admin_id"]), admin_id=admin_id)
        return jsonify({"message": "Administrador excluído com sucesso"})
