from __future__ import annotations

from flask import Flask, session

from ..common.decorators import current_admin_id, current_employee_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.forwarding_service

    @app.route("/api/records/<record_id>/forward", methods=["POST"], endpoint="forward_record")
    @login_required
    def forward_record(record_id: str):
        data = json_body()
        forward = service.forward_record(
            current_role=current_role(),
            record_id=record_id,
            forwarded_by=current_admin_id(),
            forwarded_to=data.get("forwarded_to", ""),
            recipient_type=data.get("recipient_type", ""),
            notes=data.get("notes"),
            department_id=data.get("department_id"),
            employee_id=data.get("employee_id"),
        )
        return ok(forward.to_dict(), message="Record forwarded successfully", status=201)

    @app.route("/api/boss/records", methods=["GET"], endpoint="fetch_boss_records")
    @login_required
    def fetch_boss_records():
        return ok(service.fetch_boss_records(current_role=current_role()))

    @app.route("/api/boss/reviews", methods=["POST"], endpoint="submit_review")
    @login_required
    def submit_review():
        data = json_body()
        review_id = service.submit_review(
            current_role=current_role(),
            record_id=data.get("record_id", ""),
            forward_id=data.get("forward_id", ""),
            reviewed_by=session.get("name", ""),
            review_action=data.get("review_action", ""),
            review_note=data.get("review_note"),
            department=data.get("department"),
            department_person=data.get("department_person"),
        )
        return ok({"review_id": review_id}, message="Review submitted successfully", status=201)

    @app.route("/api/boss/reviews", methods=["GET"], endpoint="fetch_reviewed_records")
    @login_required
    def fetch_reviewed_records():
        return ok(service.fetch_reviewed_records())

    @app.route("/api/hod/records", methods=["GET"], endpoint="fetch_department_records")
    @login_required
    def fetch_department_records():
        return ok(
            service.fetch_department_records(
                current_role=current_role(), department_name=session.get("department_name") or ""
            )
        )

    @app.route("/api/hod/forwards/<forward_id>/status", methods=["PUT"], endpoint="update_forward_status")
    @login_required
    def update_forward_status(forward_id: str):
        service.update_forward_status(
            current_role=current_role(), forward_id=forward_id, status=json_body().get("status", "")
        )
        return ok(message="Status updated successfully")

    @app.route("/api/hod/records/<record_id>/forward", methods=["POST"], endpoint="forward_record_to_employee")
    @login_required
    def forward_record_to_employee(record_id: str):
        data = json_body()
        forward = service.forward_record_to_employee(
            current_role=current_role(),
            record_id=record_id,
            file_id=data.get("file_id", ""),
            forwarded_by=current_admin_id(),
            employee_id=data.get("employee_id", ""),
            department_id=data.get("department_id") or session.get("department_id"),
            notes=data.get("notes"),
        )
        return ok(forward.to_dict(), message="Record forwarded to employee", status=201)

    @app.route("/api/employee/records", methods=["GET"], endpoint="fetch_employee_records")
    @login_required
    def fetch_employee_records():
        return ok(service.fetch_employee_records(employee_id=current_employee_id()))

    @app.route("/api/employee/forwards/<forward_id>/review", methods=["POST"], endpoint="review_forwarded_record")
    @login_required
    def review_forwarded_record(forward_id: str):
        data = json_body()
        review_id = service.review_forwarded_record(
            current_role=current_role(),
            forward_id=forward_id,
            employee_id=current_employee_id() or "",
            employee_name=session.get("name", ""),
            review_action=data.get("review_action", ""),
            review_note=data.get("review_note"),
        )
        return ok({"review_id": review_id}, message="Review submitted successfully", status=201)
