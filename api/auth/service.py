"""
Token issuance and verification.
"""

from __future__ import annotations

import logging

from core.db import Database
from core.errors import Forbidden
from users import repository as users_repository

from . import schemas, security

logger = logging.getLogger(__name__)


async def issue_token(database: Database, email: str) -> schemas.TokenResponse | None:
    """
    Access token for a registered email, or None when nobody has that email.
    """
    email = (email or "").strip()
    if not email:
        return None

    user = await users_repository.get_user_by_email(database, email)
    if user is None:
        logger.info("token_refused reason=unknown_email")
        return None

    return schemas.TokenResponse(access_token=security.build_access_token(email=email))


def email_from_access_token(access_token: str) -> str:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise Forbidden(str(exc)) from exc
    return str(payload["email"]).strip()
