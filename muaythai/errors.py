# muaythai/errors.py
import logging
from datetime import datetime, timezone

from flask import jsonify, request, current_app
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException

from muaythai.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404

    def __init__(self, resource, identifier=None):
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} with ID {identifier} not found"
        super().__init__(message)


class ConflictError(ApiError):
    status_code = 409


def error_response(message, status_code, details=None):
    body = {
        "success": False,
        "error": message,
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.path,
    }
    if details:
        body["details"] = details
    return jsonify(body), status_code


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, error.message)
        return error_response(error.message, error.status_code, error.details)

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(error):
        return error_response("Validation failed", 400, error.messages)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if error.code == 429:
            return error_response("Too many requests", 429, {"limit": error.description})
        return error_response(error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception(
            "Unhandled error on %s %s from %s", request.method, request.path, request.remote_addr
        )
        if current_app.debug or current_app.testing:
            return error_response(str(error), 500)
        return error_response("Internal server error", 500)
