"""Application errors.

Raised by the crud and service layers when a business rule is violated. The
handlers registered in ``shared.helpers.exception_handler`` translate them into
``{"error": message}`` responses with the matching HTTP status.
"""
from fastapi import status

from shared.utils.app_status_code import AppStatusCode


class AppError(Exception):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    status_code = AppStatusCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input."""
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INVALID_INPUT


class MissingField(ValidationError):
    """A field required by the requested operation was not supplied."""
    status_code = AppStatusCode.REQUIRED_VALIDATION_ERROR


class NotFound(AppError):
    http_status = status.HTTP_404_NOT_FOUND
    status_code = AppStatusCode.NOT_FOUND


class InvalidTransition(AppError):
    """The order cannot move from its current status to the requested one."""
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INVALID_STATUS_TRANSITION


class InvalidState(AppError):
    """The order is in a status that does not allow the operation."""
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INVALID_ORDER_STATE


class Unauthorized(AppError):
    http_status = status.HTTP_401_UNAUTHORIZED
    status_code = AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID
