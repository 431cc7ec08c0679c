"""
Domain errors.

Every error raised inside a request is an HRMSError subclass carrying the
HTTP status it maps to; main.py renders them as {"message", "error"} bodies.
"""
from enum import Enum
from typing import Optional


class HRMSError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        self.message = message or self.message
        self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class UnauthenticatedReason(str, Enum):
    NO_TOKEN = "NoToken"
    MALFORMED_HEADER = "MalformedHeader"
    INVALID_TOKEN = "InvalidToken"


UNAUTHENTICATED_MESSAGES = {
    UnauthenticatedReason.NO_TOKEN: "Access denied. No token provided.",
    UnauthenticatedReason.MALFORMED_HEADER: "Access denied. Invalid token format.",
    UnauthenticatedReason.INVALID_TOKEN: "Invalid token.",
}


class Unauthenticated(HRMSError):
    """No, malformed, invalid or expired credential"""
    status_code = 401

    def __init__(self, reason: UnauthenticatedReason, error: Optional[str] = None):
        self.reason = reason
        super().__init__(UNAUTHENTICATED_MESSAGES[reason], error or reason.value)


class Forbidden(HRMSError):
    """Valid identity, insufficient privilege"""
    status_code = 403
    message = "Access denied. Admins only."

    def __init__(self, message: Optional[str] = None, error: Optional[str] = "AdminRequired"):
        super().__init__(message, error)


class NotFound(HRMSError):
    status_code = 404
    message = "Not found"


class AssignmentFailure(HRMSError):
    """No eligible employee could receive a new task"""
    status_code = 500
    message = "Unable to assign task"


class ValidationFailure(HRMSError):
    status_code = 400
    message = "Validation failed"


class TokenErrorKind(str, Enum):
    MALFORMED = "Malformed"
    EXPIRED = "Expired"


class TokenVerificationError(Exception):
    """Raised by the token service; never leaves the auth gate"""

    def __init__(self, kind: TokenErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
