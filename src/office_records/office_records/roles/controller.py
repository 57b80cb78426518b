from __future__ import annotations

from flask import Flask

from ..common.decorators import current_admin_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/roles", methods=["GET"], endpoint="fetch_roles")
    @login_required
    def fetch_roles():
        return ok(container.role_service.fetch_roles())

    @app.route("/api/roles", methods=["POST"], endpoint="add_role")
    @login_required
    def add_role():
        data = json_body()
        role_id = container.role_service.add_role(
            current_role=current_role(),
            role_name=data.get("role_name", ""),
            employee_id=data.get("employee_id", ""),
            department_id=data.get("department_id"),
            description=data.get("description"),
            status=data.get("status") or "active",
            admin_id=data.get("admin_id"),
            assigned_by=current_admin_id(),
        )
        return ok({"role_id": role_id}, message="Role assigned successfully", status=201)

    @app.route("/api/roles/<int:role_id>", methods=["PUT"], endpoint="update_role")
    @login_required
    def update_role(role_id: int):
        container.role_service.update_role(current_role=current_role(), role_id=role_id, data=json_body())
        return ok(message="Role updated successfully")

    @app.route("/api/roles/<int:role_id>", methods=["DELETE"], endpoint="delete_role")
    @login_required
    def delete_role(role_id: int):
        container.role_service.delete_role(current_role=current_role(), role_id=role_id)
        return ok(message="Role deleted successfully")
