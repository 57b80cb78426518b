from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.decorators import current_admin_id, current_employee_id, current_role, login_required
from ..common.responses import json_body, ok
from ..common.uploads import uploaded_attachment
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        data = json_body()
        leave = service.submit_leave(
            employee_id=current_employee_id(),
            leave_type=data.get("leave_type", ""),
            start_date=parse_optional_date(data.get("start_date"), "start date"),
            end_date=parse_optional_date(data.get("end_date"), "end date"),
            reason=data.get("reason", ""),
            evidence=uploaded_attachment("evidence"),
        )
        return ok(leave.to_dict(), message="Leave application submitted", status=201)

    @app.route("/api/leaves", methods=["GET"], endpoint="fetch_leave_applications")
    @login_required
    def fetch_leave_applications():
        return ok(service.fetch_leave_applications(current_role=current_role()))

    @app.route("/api/leaves/mine", methods=["GET"], endpoint="fetch_employee_leaves")
    @login_required
    def fetch_employee_leaves():
        return ok([leave.to_dict() for leave in service.fetch_employee_leaves(current_employee_id())])

    @app.route("/api/leaves/<leave_id>/status", methods=["PUT"], endpoint="update_leave_status")
    @login_required
    def update_leave_status(leave_id: str):
        data = json_body()
        service.update_leave_status(
            current_role=current_role(),
            leave_id=leave_id,
            status=data.get("status", ""),
            admin_id=current_admin_id(),
            comment=data.get("comment"),
        )
        return ok(message=f"Leave application {data.get('status')}")

    @app.route("/api/leaves/approved", methods=["GET"], endpoint="fetch_approved_leaves")
    @login_required
    def fetch_approved_leaves():
        return ok(service.fetch_approved_leaves(current_role=current_role()))

    @app.route("/api/leaves/rejected", methods=["GET"], endpoint="fetch_rejected_leaves")
    @login_required
    def fetch_rejected_leaves():
        return ok(service.fetch_rejected_leaves(current_role=current_role()))
