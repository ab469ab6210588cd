"""
Service-layer errors.

Services raise these instead of ``HTTPException`` so they stay usable
outside a request.  ``app.main`` maps every ``ServiceError`` to a JSON
response using ``status_code`` and ``message``.
"""


class ServiceError(Exception):
    """Base class for predictable service-layer failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Raised when an id or slug has no matching record."""

    status_code = 404


class ConflictError(ServiceError):
    """Raised when a write would break a uniqueness rule."""

    status_code = 409


__all__ = ["ServiceError", "NotFoundError", "ConflictError"]
