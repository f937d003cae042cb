"""
API error taxonomy.

Handlers and repositories raise these; the error handler registered in
``create_app`` turns them into ``{"success": false, "error": ...}`` responses.
"""


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'success': False, 'error': self.message}


class BadRequest(ApiError):
    """Malformed JSON, missing required fields or invalid enum values."""
    status_code = 400
    default_message = 'Bad request'


class Unauthenticated(ApiError):
    """Missing, invalid or expired token, or bad credentials."""
    status_code = 401
    default_message = 'Authentication required'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'Permission denied'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not found'


class PersistenceError(ApiError):
    """Underlying store failure. The message is always opaque."""
    status_code = 500
    default_message = 'Database operation failed'
