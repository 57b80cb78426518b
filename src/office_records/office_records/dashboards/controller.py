from __future__ import annotations

from flask import Flask, session

from ..common.decorators import current_employee_id, current_role, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    @app.route("/api/dashboard/hr", methods=["GET"], endpoint="hr_dashboard")
    @login_required
    def hr_dashboard():
        return ok(service.hr_summary(current_role=current_role()))

    @app.route("/api/dashboard/hod", methods=["GET"], endpoint="hod_dashboard")
    @login_required
    def hod_dashboard():
        return ok(
            service.hod_summary(
                current_role=current_role(),
                department_id=session.get("department_id"),
                employee_id=current_employee_id(),
            )
        )

    @app.route("/api/dashboard/boss", methods=["GET"], endpoint="boss_dashboard")
    @login_required
    def boss_dashboard():
        return ok(service.boss_summary(current_role=current_role()))

    @app.route("/api/dashboard/registry", methods=["GET"], endpoint="registry_dashboard")
    @login_required
    def registry_dashboard():
        return ok(service.registry_summary(current_role=current_role()))

    @app.route("/api/dashboard/super-admin", methods=["GET"], endpoint="super_admin_dashboard")
    @login_required
    def super_admin_dashboard():
        return ok(service.super_admin_summary(current_role=current_role()))
