from __future__ import annotations

from typing import Any, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return jsonify(body), status


def fail(error: str, status: int = 400):
    return jsonify({"success": False, "error": error}), status


def json_body() -> dict:
    """Request payload as a dict (JSON or form)."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return fail(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        current_app.logger.exception("unhandled error on %s %s", request.method, request.path)
        if current_app.config.get("DEBUG"):
            return fail(f"Server error: {e}", 500)
        return fail("Server error", 500)
