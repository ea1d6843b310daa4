"""
User business logic: registration, profile updates, roles.
"""

from __future__ import annotations

import logging

from core import documents, listing
from core.db import Database
from core.errors import Forbidden, InvalidArgument, NotFound

from . import repository, schemas

logger = logging.getLogger(__name__)

# Changed only through set_status, which is admin-gated.
ADMIN_ONLY_FIELDS = ("status",)


def listing_query(params: schemas.UserListParams) -> listing.ListingQuery:
    return listing.build_listing(
        "users",
        exact={"status": params.status},
        contains={"email": params.search},
    )


async def list_users(database: Database, params: schemas.UserListParams) -> list[dict]:
    return await repository.list_users(database, listing_query(params))


async def get_user(database: Database, email: str) -> dict:
    user = await repository.get_user_by_email(database, email)
    if user is None:
        raise NotFound(f"User with email {email} not found.")
    return user


async def register_user(database: Database, payload: schemas.UserCreate) -> dict:
    doc = payload.model_dump(mode="json", exclude_none=True)
    user = await repository.create_user(database, doc)
    logger.info("user_created id=%s", user["_id"])
    return documents.insert_result(user)


async def update_user(database: Database, raw_id: str, payload: schemas.UserUpdate) -> dict:
    user_id = documents.parse_id(raw_id, label="user id")
    fields = payload.model_dump(mode="json", exclude_unset=True)
    fields.pop("_id", None)
    if any(field in fields for field in ADMIN_ONLY_FIELDS):
        raise Forbidden("status can only be changed by an admin.")
    if not fields:
        raise InvalidArgument("Nothing to update.")

    modified = await repository.update_user(database, user_id, fields)
    if modified is None:
        raise NotFound("User not found.")
    return documents.update_result(modified=modified)


async def set_status(database: Database, raw_id: str, status: str) -> dict:
    user_id = documents.parse_id(raw_id, label="user id")
    status = (status or "").strip()
    if not status:
        raise InvalidArgument("status is required.")

    modified = await repository.set_user_status(database, user_id, status)
    if modified is None:
        raise NotFound("User not found.")
    logger.info("user_status_set id=%s status=%s", user_id, status)
    return documents.update_result(modified=modified)


async def is_admin(database: Database, email: str) -> bool:
    user = await repository.get_user_by_email(database, email)
    return user is not None and user.get("status") == schemas.ADMIN_STATUS
