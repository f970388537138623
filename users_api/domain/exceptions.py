"""
User Service Errors
===================

Errors returned by the user service to the controller.
The controller alone decides which HTTP status each one maps to.
"""


class UserServiceError(Exception):
    """Base class for all user service failures."""


class InvalidIdentifier(UserServiceError):
    """The supplied id is not a valid 24-character hex ObjectId."""

    def __init__(self, user_id: str, message: str = "invalid user ID"):
        self.user_id = user_id
        super().__init__(f"{message}: {user_id!r}")


class NotFound(UserServiceError):
    """No user document exists for the given id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"user with id `{user_id}` not found")


class StoreError(UserServiceError):
    """Any other failure reported by the document store."""

    def __init__(self, message: str, cause: Exception = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ClientDisconnected(Exception):
    """The HTTP client went away before the store call completed."""
