from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import parse_roster
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/<roster>/analytics", methods=["GET"], endpoint="analytics")
    def analytics(roster: str):
        report = container.analytics_service.report_for_roster(
            parse_roster(roster),
            request.args.get("startDate"),
            request.args.get("endDate"),
        )
        return jsonify(report.to_dict())

    @app.route("/api/<roster>/noshow-report", methods=["GET"], endpoint="noshow_report")
    def noshow_report(roster: str):
        report = container.no_show_service.report(
            parse_roster(roster),
            request.args.get("startDate"),
            request.args.get("endDate"),
        )
        return jsonify(report.to_dict())

    @app.route("/api/<roster>/export/<kind>.csv", methods=["GET"], endpoint="export_csv")
    def export_csv(roster: str, kind: str):
        export = container.export_service.export(
            parse_roster(roster),
            kind,
            request.args.get("startDate"),
            request.args.get("endDate"),
        )
        logger.info("Exported %s for %s as %s", kind, roster, export.filename)
        return app.response_class(
            export.content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )
