# artlink/services/errors.py
"""Failures raised by the service layer.

Each error carries the HTTP status it is rendered with; the ``errors``
blueprint turns them into ``{"error": message}`` responses.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailure(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Access denied"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Already exists"


class InternalFailure(ServiceError):
    status_code = 500
