from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import parse_roster
from ..core.exceptions import BadRequestError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/<roster>/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list(roster: str):
        records = container.attendance_service.list_records(
            parse_roster(roster),
            request.args.get("startDate"),
            request.args.get("endDate"),
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/<roster>/attendance/<date>", methods=["GET"], endpoint="attendance_day")
    def attendance_day(roster: str, date: str):
        return jsonify(container.attendance_service.day_sheet(parse_roster(roster), date))

    @app.route("/api/<roster>/attendance/<date>", methods=["PUT", "POST"], endpoint="attendance_save")
    def attendance_save(roster: str, date: str):
        payload = request.get_json(silent=True)
        if payload is None:
            raise BadRequestError("Request body must be JSON")

        records = container.attendance_service.save_day(parse_roster(roster), date, payload)
        return jsonify({"success": True, "message": "Attendance saved successfully", "count": len(records)})

    @app.route("/api/<roster>/attendance/<date>/<key>", methods=["PATCH"], endpoint="attendance_times")
    def attendance_times(roster: str, date: str, key: str):
        payload = request.get_json(silent=True) or {}
        record = container.attendance_service.update_times(
            parse_roster(roster),
            date,
            key,
            check_in=payload.get("checkInTime"),
            check_out=payload.get("checkOutTime"),
        )
        return jsonify({"success": True, "record": record.to_dict()})
