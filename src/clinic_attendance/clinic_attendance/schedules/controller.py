from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_date_key
from ..common.http import parse_roster
from ..core.exceptions import BadRequestError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _optional_int(name: str):
        value = request.args.get(name)
        if value in (None, ""):
            return None
        try:
            return int(value)
        except ValueError:
            raise BadRequestError(f"{name} must be a number")

    @app.route("/api/<roster>/schedule/<date>", methods=["GET"], endpoint="schedule_day")
    def schedule_day(roster: str, date: str):
        day = container.schedule_service.roster_for_date(parse_roster(roster), parse_date_key(date))
        return jsonify(day.to_dict())

    @app.route("/api/doctors/cabins", methods=["GET"], endpoint="cabin_availability")
    def cabin_availability():
        dow = _optional_int("day")
        if dow is None:
            raise BadRequestError("day is required (0 = Sunday .. 6 = Saturday)")
        return jsonify(
            container.schedule_service.cabin_occupancy(dow=dow, slot=_optional_int("slot"), cabin=_optional_int("cabin"))
        )
