from __future__ import annotations

from flask import Flask, request, session

from ..common.decorators import current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container

# Placeholder listing kept for clients of the legacy endpoint.
_LEGACY_ADMINS = [{"id": 1, "name": "Admin 1"}, {"id": 2, "name": "Admin 2"}]


def register(app: Flask, container: Container) -> None:
    @app.route("/apis/admins", methods=["GET"], endpoint="legacy_admins")
    def legacy_admins():
        return ok(_LEGACY_ADMINS)

    @app.route("/api/admins", methods=["GET"], endpoint="list_admins")
    @login_required
    def list_admins():
        admins = container.admin_service.list_admins()
        return ok([a.to_public() for a in admins])

    @app.route("/api/admins", methods=["POST"], endpoint="create_admin")
    @login_required
    def create_admin():
        data = json_body()
        admin_id = container.admin_service.create_admin(
            current_role=current_role(),
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=data.get("role", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
        )
        return ok({"admin_id": admin_id}, message="Admin created successfully", status=201)

    @app.route("/api/admins", methods=["PUT"], endpoint="update_admin")
    @login_required
    def update_admin():
        data = json_body()
        container.admin_service.update_admin(
            current_role=current_role(),
            email=data.get("email", ""),
            name=data.get("name", ""),
            role=data.get("role", ""),
            username=data.get("username", ""),
            password=data.get("password") or None,
        )
        return ok(message="Admin updated successfully")

    @app.route("/api/admins", methods=["DELETE"], endpoint="delete_admin")
    @login_required
    def delete_admin():
        email = json_body().get("email") or request.args.get("email", "")
        container.admin_service.delete_admin(current_role=current_role(), email=email)
        return ok(message="Admin deleted successfully")

    @app.route("/api/admins/login", methods=["PUT"], endpoint="update_admin_login")
    @login_required
    def update_admin_login():
        data = json_body()
        container.admin_service.update_admin_login(
            email=session.get("email", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
        )
        session["username"] = data.get("username", "").strip()
        return ok(message="Login details updated successfully")

    @app.route("/api/admins/analytics", methods=["GET"], endpoint="admin_analytics")
    @login_required
    def admin_analytics():
        return ok(container.admin_service.admin_analytics())
