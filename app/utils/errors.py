# app/utils/errors.py
"""
API error taxonomy.
Every error rendered to a client has the shape {"error": {"code", "message"}}.
Handlers live in app/main.py.
"""


class ApiError(Exception):
    code = "InternalError"
    status_code = 500

    def __init__(self, message: str, code: str = None, status_code: int = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code

    def to_body(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class BadRequestError(ApiError):
    code = "BadRequest"
    status_code = 400


class NotFoundError(ApiError):
    code = "NotFound"
    status_code = 404


class DatabaseError(ApiError):
    """Raised by services when a query fails. Message is always generic."""
    code = "DatabaseError"
    status_code = 500
