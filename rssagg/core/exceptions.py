"""
Custom exceptions for the RSS aggregator API.

Every exception carries the HTTP status it maps to; the message ends up in
the ``{"error": ...}`` response body.
"""

from fastapi import HTTPException, status


class UnauthenticatedError(HTTPException):
    """Raised when the credential is missing or malformed."""
    def __init__(self, detail: str = "Unauthenticated"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundError(HTTPException):
    """Raised when a lookup finds nothing."""
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """Raised when the path or body cannot be used."""
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """Raised when a write would break a uniqueness constraint."""
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InternalError(HTTPException):
    """Raised when the store or encoder fails."""
    def __init__(self, detail: str = "Internal Server Error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
