from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import BadRequestError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise BadRequestError("Request body must be a JSON object")
        return payload

    @app.route("/api/staff", methods=["GET"], endpoint="staff_list")
    def staff_list():
        active_only = request.args.get("active") in {"1", "true", "yes"}
        members = container.staff_service.list_members(request.args.get("kind"), active_only=active_only)
        return jsonify([m.to_dict() for m in members])

    @app.route("/api/staff", methods=["POST"], endpoint="staff_create")
    def staff_create():
        staff_id = container.staff_service.create(_payload())
        return jsonify(container.staff_service.get(staff_id).to_dict()), 201

    @app.route("/api/staff/<int:staff_id>", methods=["GET"], endpoint="staff_detail")
    def staff_detail(staff_id: int):
        return jsonify(container.staff_service.get(staff_id).to_dict())

    @app.route("/api/staff/<int:staff_id>", methods=["PUT"], endpoint="staff_update")
    def staff_update(staff_id: int):
        return jsonify(container.staff_service.update(staff_id, _payload()).to_dict())

    @app.route("/api/staff/<int:staff_id>/toggle-active", methods=["POST"], endpoint="staff_toggle")
    def staff_toggle(staff_id: int):
        return jsonify(container.staff_service.toggle_active(staff_id).to_dict())

    @app.route("/api/staff/<int:staff_id>", methods=["DELETE"], endpoint="staff_delete")
    def staff_delete(staff_id: int):
        container.staff_service.delete(staff_id)
        return jsonify({"success": True})
