"""
Errors Module - Failure kinds surfaced by the subscribe and broadcast operations

Each error carries the HTTP status the API answers with, so route handlers can
simply raise and let the application error handler render the JSON response.
"""


class ServiceError(Exception):
    """Base class for all service errors"""

    status_code = 500

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def __str__(self):
        return self.message

    def to_dict(self):
        payload = {'message': self.message}
        payload.update(self.details)
        return payload


class ValidationError(ServiceError):
    """Missing or empty required fields"""
    status_code = 400


class AuthorizationError(ServiceError):
    """Supplied admin credential does not match"""
    status_code = 401


class NotFoundError(ServiceError):
    """Nothing to act on, e.g. a project without subscribers"""
    status_code = 404


class ConfigurationError(ServiceError):
    """Server is missing a secret or transport setting"""
    status_code = 500


class TransportError(ServiceError):
    """Outbound email send failed or timed out"""
    status_code = 500


__all__ = [
    'ServiceError',
    'ValidationError',
    'AuthorizationError',
    'NotFoundError',
    'ConfigurationError',
    'TransportError'
]
