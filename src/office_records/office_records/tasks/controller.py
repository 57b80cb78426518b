from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.decorators import current_admin_id, current_employee_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.task_service

    @app.route("/api/tasks/assigned", methods=["GET"], endpoint="fetch_assigned_tasks")
    @login_required
    def fetch_assigned_tasks():
        return ok(service.fetch_assigned_tasks(current_admin_id()))

    @app.route("/api/tasks", methods=["POST"], endpoint="add_task")
    @login_required
    def add_task():
        data = json_body()
        task_id = service.add_task(
            current_role=current_role(),
            title=data.get("title", ""),
            description=data.get("description"),
            employee_id=data.get("employee_id", ""),
            assigned_by=current_admin_id(),
            due_date=parse_optional_date(data.get("due_date"), "due date"),
            priority=data.get("priority") or "medium",
            status=data.get("status"),
        )
        return ok({"task_id": task_id}, message="Task assigned successfully", status=201)

    @app.route("/api/tasks/<task_id>", methods=["PUT"], endpoint="update_task")
    @login_required
    def update_task(task_id: str):
        service.update_task(current_role=current_role(), task_id=task_id, data=json_body())
        return ok(message="Task updated successfully")

    @app.route("/api/tasks/mine", methods=["GET"], endpoint="fetch_employee_tasks")
    @login_required
    def fetch_employee_tasks():
        return ok(service.fetch_employee_tasks(current_employee_id()))

    @app.route("/api/tasks/mine/finished", methods=["GET"], endpoint="fetch_finished_tasks")
    @login_required
    def fetch_finished_tasks():
        return ok(service.fetch_finished_tasks(current_employee_id()))

    @app.route("/api/tasks/<task_id>/status", methods=["PUT"], endpoint="update_task_status")
    @login_required
    def update_task_status(task_id: str):
        service.update_task_status(
            task_id=task_id, employee_id=current_employee_id(), status=json_body().get("status", "")
        )
        return ok(message="Task status updated")
