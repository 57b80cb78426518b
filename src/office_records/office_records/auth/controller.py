from __future__ import annotations

from flask import Flask, session

from ..admins.service import redirect_path_for
from ..common.responses import fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        username = (data.get("username") or "").strip()
        password = data.get("password") or ""
        if not username or not password:
            return fail("Username and password are required", 400)

        user = container.auth_service.authenticate(username, password)

        session.clear()
        session.permanent = True
        session.update(user.to_session())

        app.logger.info("login ok for %s", user.username)
        return ok(
            {"user": user.to_session(), "redirect": redirect_path_for(user.role)},
            message="Login successful",
        )

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out successfully")

    @app.route("/api/auth/check", methods=["GET"], endpoint="check_auth")
    def check_auth():
        if "admin_id" not in session:
            return fail("Not authenticated", 401)
        return ok({"user": {k: v for k, v in session.items() if not k.startswith("_")}})
