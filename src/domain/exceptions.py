"""
Session Store exceptions.

Every domain rule violation carries a stable ``code`` so callers can map it
to a client-facing message. ``StoreUnavailableError`` is the only kind that
signals infrastructure failure rather than a rule violation.
"""

from typing import Any, Optional


class StoreError(Exception):
    """Base exception for all session store errors."""

    retryable: bool = False

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidPayloadError(StoreError):
    """Raised when a required input is empty."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_PAYLOAD")


class DuplicateUsernameError(StoreError):
    """Raised when an account with the same username already exists."""

    def __init__(self, username: str):
        super().__init__(
            f"User with username `{username}` already exists",
            code="USERNAME_TAKEN",
            details={"username": username},
        )


class UserNotFoundError(StoreError):
    """Raised when a lookup by username or id finds no account."""

    def __init__(self, key: str):
        super().__init__(
            f"User `{key}` does not exist",
            code="USER_NOT_FOUND",
            details={"user": key},
        )


class UnknownUserError(StoreError):
    """Raised when a session is issued for an owner that does not exist."""

    def __init__(self, owner_id: str):
        super().__init__(
            f"Cannot issue a session for unknown user `{owner_id}`",
            code="UNKNOWN_USER",
            details={"owner_id": owner_id},
        )


class SessionNotFoundError(StoreError):
    """Raised when a session id was never issued or has been deleted."""

    def __init__(self, message: str = "Session not found"):
        super().__init__(message, code="SESSION_NOT_FOUND")


class SessionExpiredError(StoreError):
    """Raised when a session exists but its expiry time has passed."""

    def __init__(self, expired_at: str):
        super().__init__(
            "Session has expired",
            code="SESSION_EXPIRED",
            details={"expired_at": expired_at},
        )


class SessionIdCollisionError(StoreError):
    """Raised when a generated session id is already stored."""

    retryable = True

    def __init__(self):
        super().__init__("Session id already in use", code="SESSION_ID_COLLISION")


class SessionOwnershipError(StoreError):
    """Raised when a session is dropped on behalf of a user who does not own it."""

    def __init__(self, owner_id: str):
        super().__init__(
            "Session does not belong to this user",
            code="FORBIDDEN",
            details={"owner_id": owner_id},
        )


class MissingCredentialsError(StoreError):
    """Raised when a password is required but was empty."""

    def __init__(self, message: str = "Provided password was empty"):
        super().__init__(message, code="MISSING_CREDENTIALS")


class AuthenticationFailedError(StoreError):
    """Raised when a password does not match the stored hash."""

    def __init__(self, message: str = "Passwords do not match"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class StoreUnavailableError(StoreError):
    """Raised when the database itself fails (connectivity, unmapped constraints)."""

    retryable = True

    def __init__(self, message: str = "Session store unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")
