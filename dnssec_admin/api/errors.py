from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging

from dnssec_admin.dnssec.errors import (
    ToolUnavailableError,
    CommandFailedError,
    MetadataInconsistentError,
    InvalidZoneNameError,
    DomainNotFoundError,
    DatabaseError,
)

# Configure module logger
logger = logging.getLogger(__name__)

class APIError(Exception):
    """Base class for API errors"""
    status_code = 500

    def __init__(self, message, status_code=None, payload=None):
        super().__init__()
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['status'] = 'error'
        rv['message'] = self.message
        return rv

class BadRequestError(APIError):
    """Exception raised for invalid request parameters"""
    status_code = 400

class NotFoundError(APIError):
    """Exception raised for resource not found"""
    status_code = 404

class ConflictError(APIError):
    """Exception raised when stored zone state contradicts the configuration"""
    status_code = 409

class BadGatewayError(APIError):
    """Exception raised when the DNSSEC utility reports a failure"""
    status_code = 502

class ServiceUnavailableError(APIError):
    """Exception raised when the DNSSEC utility cannot be called"""
    status_code = 503

class ServerError(APIError):
    """Exception raised for server-side errors"""
    status_code = 500

# Zone operation errors and the API error each one is shown as
ERROR_MAP = [
    (InvalidZoneNameError, BadRequestError),
    (DomainNotFoundError, NotFoundError),
    (MetadataInconsistentError, ConflictError),
    (CommandFailedError, BadGatewayError),
    (ToolUnavailableError, ServiceUnavailableError),
    (DatabaseError, ServerError),
]

def api_error_from(error):
    """
    Convert a DnssecError from an operation result into an APIError

    Args:
        error: DnssecError instance

    Returns:
        APIError: Error carrying the matching HTTP status
    """
    for error_type, api_error_type in ERROR_MAP:
        if isinstance(error, error_type):
            return api_error_type(error.message, payload={'code': error.code})
    return ServerError(error.message, payload={'code': error.code})

def register_error_handlers(app):
    """Register error handlers for the Flask app"""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Redirects raised by routing are not errors
        if error.code is None or error.code < 400:
            return error
        return jsonify({
            'status': 'error',
            'message': error.description or error.name
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.error(f"Unexpected error: {str(error)}", exc_info=True)
        return jsonify({
            'status': 'error',
            'message': 'An unexpected error occurred'
        }), 500
