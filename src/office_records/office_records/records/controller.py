from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_optional_date
from ..common.decorators import current_role, login_required
from ..common.responses import json_body, ok
from ..common.uploads import uploaded_attachment
from ..container import Container
from ..core.constants import DEFAULT_RECENT_LIMIT


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    @app.route("/api/files/<file_id>/records", methods=["POST"], endpoint="add_record")
    @login_required
    def add_record(file_id: str):
        data = json_body()
        record = service.add_record(
            current_role=current_role(),
            file_id=file_id,
            type=data.get("type", ""),
            sender=data.get("from", ""),
            recipient=data.get("to", ""),
            subject=data.get("subject", ""),
            content=data.get("content"),
            status=data.get("status"),
            reference=data.get("reference"),
            date=parse_optional_date(data.get("date")),
            attachment=uploaded_attachment("attachment"),
        )
        return ok(record.to_dict(), message="Record added successfully", status=201)

    @app.route("/api/records/<record_id>", methods=["PUT"], endpoint="update_record")
    @login_required
    def update_record(record_id: str):
        service.update_record(current_role=current_role(), record_id=record_id, data=json_body())
        return ok(message="Record updated successfully")

    @app.route("/api/records/<record_id>", methods=["DELETE"], endpoint="delete_record")
    @login_required
    def delete_record(record_id: str):
        service.delete_record(current_role=current_role(), record_id=record_id)
        return ok(message="Record deleted successfully")

    @app.route("/api/records/search", methods=["GET"], endpoint="search_records")
    @login_required
    def search_records():
        rows = service.search_records(request.args.get("q", ""), status=request.args.get("status") or None)
        return ok(rows)

    @app.route("/api/records/recent", methods=["GET"], endpoint="recent_activity")
    @login_required
    def recent_activity():
        limit = request.args.get("limit", type=int) or DEFAULT_RECENT_LIMIT
        return ok(service.recent_activity(limit))
