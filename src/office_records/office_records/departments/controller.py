from __future__ import annotations

from flask import Flask

from ..common.decorators import current_admin_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="fetch_departments")
    @login_required
    def fetch_departments():
        return ok(container.department_service.fetch_departments())

    @app.route("/api/departments", methods=["POST"], endpoint="add_department")
    @login_required
    def add_department():
        data = json_body()
        department_id = container.department_service.add_department(
            current_role=current_role(),
            name=data.get("name", ""),
            description=data.get("description"),
            head_of_department=data.get("head_of_department"),
            location=data.get("location"),
            created_by=current_admin_id(),
        )
        return ok({"department_id": department_id}, message="Department added successfully", status=201)

    @app.route("/api/departments/<int:department_id>", methods=["PUT"], endpoint="update_department")
    @login_required
    def update_department(department_id: int):
        container.department_service.update_department(
            current_role=current_role(), department_id=department_id, data=json_body()
        )
        return ok(message="Department updated successfully")

    @app.route("/api/departments/<int:department_id>", methods=["DELETE"], endpoint="delete_department")
    @login_required
    def delete_department(department_id: int):
        container.department_service.delete_department(current_role=current_role(), department_id=department_id)
        return ok(message="Department deleted successfully")
