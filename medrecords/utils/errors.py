# /medrecords/utils/errors.py
"""Exceptions raised by controllers and translated by the error handlers.

Every controller raises one of these instead of building an error response
itself, so all routes share a single ``{"error": message}`` contract.
"""


class APIError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, **extra):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.extra = extra

    def to_dict(self):
        payload = {'error': self.message}
        payload.update(self.extra)
        return payload


class ValidationError(APIError):
    status_code = 400
    default_message = 'Invalid request'


class UniquenessViolation(APIError):
    status_code = 400
    default_message = 'A record with this value already exists'


class AuthenticationError(APIError):
    status_code = 401
    default_message = 'Invalid credentials'


class UnauthorizedError(APIError):
    status_code = 403
    default_message = 'Access denied'


class NotFoundError(APIError):
    status_code = 404
    default_message = 'Resource not found'


class InternalError(APIError):
    status_code = 500
    default_message = 'Internal server error'


class IdentifierExhaustedError(InternalError):
    """No free identifier was found within the configured attempt budget."""
    default_message = 'Unable to allocate a unique identifier'
