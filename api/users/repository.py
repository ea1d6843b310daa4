"""
User persistence helpers.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import documents, listing
from core.db import Database
from core.errors import Conflict

PUBLIC_FIELDS = ("_id", "name", "email", "mobile", "status")


def _duplicate_email(email: Any) -> Conflict:
    return Conflict(f"User with email {email} already exists.")


async def create_user(database: Database, doc: dict[str, Any]) -> dict:
    try:
        row = await database.fetch_one(
            """
            INSERT INTO users (doc)
            VALUES ($1)
            RETURNING id, doc
            """,
            doc,
        )
    except asyncpg.UniqueViolationError as exc:
        raise _duplicate_email(doc.get("email")) from exc
    if row is None:
        raise RuntimeError("Failed to create user.")
    return documents.to_document(row)


async def get_user_by_email(database: Database, email: str) -> dict | None:
    row = await database.fetch_one(
        """
        SELECT id, doc
        FROM users
        WHERE doc->>'email' = $1
        """,
        email,
    )
    return documents.to_document(row) if row is not None else None


async def get_public_user_by_email(database: Database, email: str) -> dict | None:
    """
    Seller/customer card: `PUBLIC_FIELDS` only.
    """
    user = await get_user_by_email(database, email)
    if user is None:
        return None
    return {key: user[key] for key in PUBLIC_FIELDS if user.get(key) is not None}


async def list_users(database: Database, plan: listing.ListingQuery) -> list[dict]:
    return await listing.fetch_items(database, plan)


async def update_user(database: Database, user_id: int, fields: dict[str, Any]) -> bool | None:
    """
    Merge `fields` into the user document.

    Returns None when the user does not exist, otherwise whether anything changed.
    """
    try:
        row = await database.fetch_one(
            """
            WITH target AS (
                SELECT id, doc
                FROM users
                WHERE id = $1
                FOR UPDATE
            )
            UPDATE users AS u
            SET doc = target.doc || $2::jsonb
            FROM target
            WHERE u.id = target.id
            RETURNING (target.doc IS DISTINCT FROM u.doc) AS modified
            """,
            user_id,
            fields,
        )
    except asyncpg.UniqueViolationError as exc:
        raise _duplicate_email(fields.get("email")) from exc
    if row is None:
        return None
    return bool(row["modified"])


async def set_user_status(database: Database, user_id: int, status: str) -> bool | None:
    row = await database.fetch_one(
        """
        WITH target AS (
            SELECT id, doc
            FROM users
            WHERE id = $1
            FOR UPDATE
        )
        UPDATE users AS u
        SET doc = jsonb_set(target.doc, '{status}', to_jsonb($2::text))
        FROM target
        WHERE u.id = target.id
        RETURNING (target.doc IS DISTINCT FROM u.doc) AS modified
        """,
        user_id,
        status,
    )
    if row is None:
        return None
    return bool(row["modified"])
