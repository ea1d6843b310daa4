"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core import db
from core.errors import Forbidden, Unauthorized
from users import repository as users_repository
from users.schemas import ADMIN_STATUS

from . import service


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise Unauthorized("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise Forbidden("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise Forbidden("Authorization must be: Bearer <token>.")
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_email(access_token: str = Depends(get_bearer_token)) -> str:
    return service.email_from_access_token(access_token)


async def require_admin(
    email: str = Depends(get_current_email),
    database: db.Database = Depends(db.get_db),
) -> dict:
    user = await users_repository.get_user_by_email(database, email)
    if user is None or user.get("status") != ADMIN_STATUS:
        raise Forbidden("Admin access required.")
    return user
