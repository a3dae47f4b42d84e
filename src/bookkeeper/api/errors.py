"""JSON error responses for the API."""

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from bookkeeper.domain.errors import DomainError

logger = logging.getLogger(__name__)


def error_response(status: int, code: str, message: str):
    """Build the ``{"error": {"code", "message"}}`` response body."""
    return jsonify({"error": {"code": code, "message": message}}), status


def register_error_handlers(app: Flask) -> None:
    """Answer every failure with a JSON error body."""

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        logger.debug("Rejected request: %s (%s)", error.message, error.code)
        return error_response(error.status, error.code, error.message)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if isinstance(error, MethodNotAllowed):
            body, status = error_response(405, "method_not_allowed", "method not allowed")
            body.headers["Allow"] = ", ".join(sorted(error.valid_methods or []))
            return body, status
        if error.code == 404:
            return error_response(404, "not_found", "not found")
        return error_response(error.code or 500, "http_error", error.description or error.name)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception("Unhandled error while serving request")
        return error_response(500, "internal_error", "internal server error")
