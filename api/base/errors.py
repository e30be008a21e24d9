# api/base/errors.py
"""
Error taxonomy for the REST API.

Every error raised from a usecase is an ``ApiError``; the Flask error
handlers registered in ``main.create_app`` turn it into ``{"message": ...}``
with the matching status code.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Missing or invalid input (field, identifier, enum value)"""
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(ApiError):
    """No document matched, or its current state does not allow the change"""
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    """Duplicate of an existing document (kept on 400 for existing clients)"""
    status_code = 400
    default_message = "Already exists"


class StoreError(ApiError):
    """Unexpected MongoDB failure"""
    status_code = 500
    default_message = "Server error"
