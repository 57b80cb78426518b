from __future__ import annotations

from flask import Flask

from ..common.decorators import current_admin_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="fetch_employees")
    @login_required
    def fetch_employees():
        return ok(service.fetch_employees())

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        data = json_body()
        employee_id = service.add_employee(
            current_role=current_role(),
            name=data.get("name", ""),
            position=data.get("position", ""),
            email=data.get("email", ""),
            department_id=data.get("department_id"),
            phone=data.get("phone"),
            status=data.get("status") or "active",
            created_by=current_admin_id(),
        )
        return ok({"employee_id": employee_id}, message="Employee added successfully", status=201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="fetch_employee_details")
    @login_required
    def fetch_employee_details(employee_id: str):
        return ok(service.fetch_employee_details(employee_id))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: str):
        service.update_employee(current_role=current_role(), employee_id=employee_id, data=json_body())
        return ok(message="Employee updated successfully")

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: str):
        service.delete_employee(current_role=current_role(), employee_id=employee_id)
        return ok(message="Employee deleted successfully")

    @app.route("/api/departments/<int:department_id>/employees", methods=["GET"], endpoint="department_employees")
    @login_required
    def department_employees(department_id: int):
        return ok(service.fetch_department_employees(department_id))
