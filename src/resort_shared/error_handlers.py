"""
Centralized error handlers for the Flask application.

Every response is JSON; the error taxonomy in `resort_shared.errors` maps
to its own HTTP status and store failures are logged with their context.
"""

from http import HTTPStatus

from flask import Flask, jsonify, request
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from resort_shared.errors import DataUnavailable, ResortError
from resort_shared.logging_config import get_logger
from resort_shared.serializers import error_response

logger = get_logger(__name__)


def register_error_handlers(app: Flask) -> None:
    """
    Register centralized error handlers for the Flask app.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(DataUnavailable)
    def handle_data_unavailable(e: DataUnavailable):
        """Store failures: full context in the log, a generic message to the client."""
        logger.error(
            "Store failure on %s %s",
            request.method,
            request.path,
            extra=e.log_context(),
            exc_info=e.cause or e,
        )
        return jsonify(error_response("Data temporarily unavailable")), e.status

    @app.errorhandler(ResortError)
    def handle_resort_error(e: ResortError):
        """NotFound, Conflict and ValidationError carry their own status."""
        logger.warning(
            "%s on %s %s: %s",
            type(e).__name__,
            request.method,
            request.path,
            e.message,
        )
        return jsonify(error_response(e.message, e.details or None)), e.status

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(e: PydanticValidationError):
        """Handle Pydantic validation errors."""
        logger.warning(f"Pydantic validation error: {e}")
        details = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return jsonify(
            error_response("Invalid request data", {"errors": details})
        ), HTTPStatus.BAD_REQUEST

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        """Handle HTTP exceptions from Werkzeug (404, 405, bad JSON bodies)."""
        logger.warning(f"HTTP exception {e.code}: {e.description}")
        return jsonify(error_response(e.description or str(e))), e.code

    @app.errorhandler(Exception)
    def handle_generic_exception(e: Exception):
        """Handle any unhandled exceptions."""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify(error_response("Internal server error")), HTTPStatus.INTERNAL_SERVER_ERROR
