"""Application factory for ThaiTax backend services."""

from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound

from thaitax.backend.services import TaxValidationError

from .http import problem_response
from .routes import register_routes

_LOGGER = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_ERROR = "method not allowed"
NOT_FOUND_ERROR = "not found"


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    # Bracket labels contain Thai text; keep it readable on the wire.
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.json.sort_keys = False  # type: ignore[attr-defined]

    register_routes(app)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        _LOGGER.info("Rejected %s %s: %s", request.method, request.path, message)
        return problem_response(message, status=400).to_response()

    @app.errorhandler(TaxValidationError)
    def handle_validation_error(error: TaxValidationError):
        """Surface domain validation errors to clients."""

        _LOGGER.info("Rejected %s %s: %s", request.method, request.path, error)
        return problem_response(str(error), status=400).to_response()

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error: MethodNotAllowed):
        """Reject anything other than the declared methods with a JSON body."""

        response, status = problem_response(
            METHOD_NOT_ALLOWED_ERROR, status=405
        ).to_response()
        if error.valid_methods:
            response.headers["Allow"] = ", ".join(sorted(error.valid_methods))
        return response, status

    @app.errorhandler(NotFound)
    def handle_not_found(_: NotFound):
        return problem_response(NOT_FOUND_ERROR, status=404).to_response()

    return app


__all__ = ["create_app"]
