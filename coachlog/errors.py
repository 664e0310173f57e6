"""CoachLog exceptions and their JSON error handlers."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class CoachLogError(Exception):
    """Base exception for CoachLog errors."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidArgument(CoachLogError):
    """Raised for bad input (rating, index, missing identifiers)."""

    status_code = 400


class NotFound(CoachLogError):
    """Raised when a workout/customer does not exist or belongs to someone else."""

    status_code = 404


class DerivedDataFailure(CoachLogError):
    """Raised when exercise/PB bookkeeping fails. Never surfaced by completions."""

    status_code = 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(CoachLogError)
    def handle_coachlog_error(exc: CoachLogError):
        logger.warning("Application error: %s", exc.message)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.exception("Unhandled error: %r", exc)
        return jsonify({"error": "An unexpected error occurred"}), 500
