from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.enums import RosterKind
from ..core.exceptions import BadRequestError, ConflictError, DomainError, NotFoundError, StorageUnavailableError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (BadRequestError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StorageUnavailableError, 503),
)


def parse_roster(value: str) -> RosterKind:
    try:
        return RosterKind(value)
    except ValueError:
        raise BadRequestError(f"Unknown roster {value!r}; expected 'doctors' or 'employees'")


def status_for(exc: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        status = status_for(exc)
        if status >= 500:
            logger.error("%s: %s", type(exc).__name__, exc)
        else:
            logger.info("%s: %s", type(exc).__name__, exc)
        return jsonify({"success": False, "error": type(exc).__name__, "message": str(exc)}), status

    @app.errorhandler(Exception)
    def _unexpected_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error")
        return jsonify({"success": False, "error": "InternalError", "message": "Internal server error"}), 500
