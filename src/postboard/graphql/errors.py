"""
User-facing errors raised by resolvers and mutation handlers.

Each error carries a stable ``code`` in its GraphQL extensions so clients
can branch on the failure kind without parsing messages.
"""

from graphql import GraphQLError


class PostboardError(GraphQLError):
    """Base class for labeled errors surfaced in the GraphQL response."""

    code = "POSTBOARD_ERROR"

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": self.code})


class NotFound(PostboardError):
    """Raised when a referenced entity is absent at validation time."""

    code = "NOT_FOUND"


class Conflict(PostboardError):
    """Raised when a unique field is already taken."""

    code = "CONFLICT"


class MalformedReference(PostboardError):
    """Raised when an identifier cannot be parsed into an ObjectId."""

    code = "MALFORMED_REFERENCE"
