"""
Postboard Error Types

Every failure a client can observe maps to exactly one of these, and each
carries the HTTP status the web layer answers with.
"""


class PostboardError(Exception):
    """Base class for errors surfaced to callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PostboardError):
    """A required field is missing, empty or of the wrong type."""

    status_code = 400
    default_message = "Invalid request"

    def __init__(self, message: str | None = None, field: str | None = None):
        self.field = field
        super().__init__(message)

    @classmethod
    def missing(cls, field: str) -> "ValidationError":
        return cls(f"Missing required field: {field}", field=field)


class NotFound(PostboardError):
    """The referenced post does not exist."""

    status_code = 404
    default_message = "Post not found"


class AuthorizationError(PostboardError):
    """The supplied password does not match the post's password."""

    status_code = 403
    default_message = "Incorrect password"


class StorageFailure(PostboardError):
    """The underlying store failed (I/O, constraint, closed connection)."""

    status_code = 500
    default_message = "Storage failure"
