"""
Error types raised by the resolver layer
"""

from typing import Any

# Business-rule messages returned verbatim to API clients
EMAIL_ALREADY_REGISTERED = "El email ya está registrado"
EMAIL_REGISTERED_BY_ANOTHER_USER = "El email ya está registrado por otro usuario"
AUTHOR_NOT_FOUND = "El autor no existe"
POST_NOT_FOUND = "La publicación no existe"
COMMENT_POST_NOT_FOUND = "El post no existe"
POST_ALREADY_LIKED = "El usuario ya ha dado like a esta publicación"
POST_NOT_LIKED = "El usuario no ha dado like a esta publicación"
COMMENT_NOT_FOUND = "El comentario no existe"


class SocialNetError(Exception):
    """Base class for errors surfaced through the GraphQL API."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class DomainError(SocialNetError):
    """A business rule was violated (duplicate email, missing reference, ...)."""

    code = "DOMAIN_ERROR"


class StoreError(SocialNetError):
    """The store rejected an operation, e.g. a malformed identifier."""

    code = "STORE_ERROR"
