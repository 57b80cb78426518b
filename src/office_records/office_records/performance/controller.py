from __future__ import annotations

from flask import Flask

from ..common.decorators import current_admin_id, current_employee_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.performance_service

    @app.route("/api/performance", methods=["GET"], endpoint="fetch_performance_reviews")
    @login_required
    def fetch_performance_reviews():
        return ok(service.fetch_performance_reviews(current_admin_id()))

    @app.route("/api/performance", methods=["POST"], endpoint="add_performance_review")
    @login_required
    def add_performance_review():
        data = json_body()
        review_id = service.add_review(
            current_role=current_role(),
            employee_id=data.get("employee_id", ""),
            reviewer_id=current_admin_id(),
            rating=data.get("rating"),
            feedback=data.get("feedback"),
            goals=data.get("goals"),
            status=data.get("status") or "pending",
        )
        return ok({"review_id": review_id}, message="Performance review added successfully", status=201)

    @app.route("/api/performance/<review_id>", methods=["PUT"], endpoint="update_performance_review")
    @login_required
    def update_performance_review(review_id: str):
        data = json_body()
        service.update_review(
            current_role=current_role(),
            review_id=review_id,
            rating=data.get("rating"),
            feedback=data.get("feedback"),
            goals=data.get("goals"),
            status=data.get("status", ""),
        )
        return ok(message="Performance review updated successfully")

    @app.route("/api/performance/mine", methods=["GET"], endpoint="fetch_employee_performance")
    @login_required
    def fetch_employee_performance():
        return ok(service.fetch_employee_performance(current_employee_id()))
