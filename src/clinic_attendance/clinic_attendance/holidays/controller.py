from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="holiday_list")
    def holiday_list():
        return jsonify([h.to_dict() for h in container.holiday_service.list_holidays()])

    @app.route("/api/holidays", methods=["POST"], endpoint="holiday_create")
    def holiday_create():
        payload = request.get_json(silent=True) or {}
        holiday = container.holiday_service.add(
            date_value=payload.get("date"),
            name=payload.get("name"),
            description=payload.get("description"),
        )
        return jsonify(holiday.to_dict()), 201

    @app.route("/api/holidays/<date>", methods=["DELETE"], endpoint="holiday_delete")
    def holiday_delete(date: str):
        container.holiday_service.delete(date)
        return jsonify({"success": True})
