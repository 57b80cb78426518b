from __future__ import annotations

from flask import Flask

from ..common.decorators import current_admin_id, current_role, login_required
from ..common.responses import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.file_service

    @app.route("/api/files", methods=["GET"], endpoint="list_files")
    @login_required
    def list_files():
        return ok([f.to_dict() for f in service.list_files(current_admin_id())])

    @app.route("/api/files", methods=["POST"], endpoint="add_file")
    @login_required
    def add_file():
        data = json_body()
        entry = service.add_file(
            current_role=current_role(),
            admin_id=current_admin_id(),
            name=data.get("name", ""),
            type=data.get("type", ""),
            reference_number=data.get("referenceNumber"),
        )
        return ok(entry.to_dict(), message="File created successfully", status=201)

    @app.route("/api/files/<file_id>", methods=["GET"], endpoint="get_file")
    @login_required
    def get_file(file_id: str):
        return ok(service.get_file(file_id).to_dict())

    @app.route("/api/files/<file_id>", methods=["PUT"], endpoint="update_file")
    @login_required
    def update_file(file_id: str):
        service.update_file(current_role=current_role(), file_id=file_id, data=json_body())
        return ok(message="File updated successfully")

    @app.route("/api/files/<file_id>", methods=["DELETE"], endpoint="delete_file")
    @login_required
    def delete_file(file_id: str):
        service.delete_file(current_role=current_role(), file_id=file_id)
        return ok(message="File deleted successfully")
