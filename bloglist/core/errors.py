"""Typed errors raised by the services and mapped to HTTP responses at the edge.

Every error carries the message shown to the client and the status it maps to.
Services raise these; routers let them propagate to the handlers registered in
``bloglist.api.error_handlers``.
"""

from typing import Optional


class BloglistError(Exception):
    """Base exception for all domain errors."""

    http_status = 500

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(BloglistError):
    """Missing required field or malformed identifier."""
    http_status = 400


class ConflictError(BloglistError):
    """Uniqueness violation, e.g. a username that is already taken."""
    http_status = 400


class Unauthorized(BloglistError):
    """Caller identity is missing, invalid, or not allowed to do this."""
    http_status = 401


class MissingToken(Unauthorized):
    def __init__(self):
        super().__init__("invalid token")


class InvalidToken(Unauthorized):
    def __init__(self):
        super().__init__("invalid token")


class InvalidCredentials(Unauthorized):
    def __init__(self):
        super().__init__("invalid username or password")


class NotFound(BloglistError):
    """Unknown id. Rendered as an empty 404."""
    http_status = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConsistencyError(BloglistError):
    """A post/author paired write completed only partially."""
    http_status = 500
