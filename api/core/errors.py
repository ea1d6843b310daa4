"""
Error taxonomy shared by all feature packages.

Each error is an `HTTPException`, so FastAPI renders it as
`{"detail": "..."}` with the mapped status code.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class MarketplaceError(HTTPException):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.http_status, detail=detail or self.default_detail)


class Unauthorized(MarketplaceError):
    http_status = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized access."


class Forbidden(MarketplaceError):
    http_status = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden access."


class NotFound(MarketplaceError):
    http_status = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."


# Duplicate keys answer 400, which existing clients already handle.
class Conflict(MarketplaceError):
    http_status = status.HTTP_400_BAD_REQUEST
    default_detail = "Duplicate key."


class InvalidArgument(MarketplaceError):
    http_status = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid argument."
