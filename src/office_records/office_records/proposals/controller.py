from __future__ import annotations

from flask import Flask, session

from ..common.decorators import current_admin_id, current_employee_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.proposal_service

    @app.route("/api/proposals", methods=["POST"], endpoint="submit_proposal")
    @login_required
    def submit_proposal():
        data = json_body()
        proposal_id = service.submit_proposal(
            employee_id=current_employee_id(),
            subject=data.get("subject", ""),
            content=data.get("content", ""),
        )
        return ok({"proposal_id": proposal_id}, message="Proposal submitted successfully", status=201)

    @app.route("/api/proposals", methods=["GET"], endpoint="fetch_proposals")
    @login_required
    def fetch_proposals():
        return ok(service.fetch_proposals(session.get("department_id")))

    @app.route("/api/proposals/mine", methods=["GET"], endpoint="fetch_employee_proposals")
    @login_required
    def fetch_employee_proposals():
        return ok(service.fetch_employee_proposals(current_employee_id()))

    @app.route("/api/proposals/<proposal_id>/review", methods=["PUT"], endpoint="review_proposal")
    @login_required
    def review_proposal(proposal_id: str):
        data = json_body()
        service.review_proposal(
            current_role=current_role(),
            proposal_id=proposal_id,
            status=data.get("status", ""),
            reviewer_id=current_admin_id(),
            review_note=data.get("review_note"),
        )
        return ok(message="Proposal review submitted successfully")
