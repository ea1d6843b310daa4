"""
Helpers for turning table rows into API documents and back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any

from .errors import InvalidArgument

_MAX_ID = 2**63 - 1


def parse_id(raw: str, *, label: str = "id") -> int:
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()):
        raise InvalidArgument(f"Invalid {label}: {raw!r}.")
    parsed = int(value)
    if parsed < 1 or parsed > _MAX_ID:
        raise InvalidArgument(f"Invalid {label}: {raw!r}.")
    return parsed


def to_document(row: dict[str, Any]) -> dict[str, Any]:
    """
    `{"id": 7, "doc": {...}}` -> `{"_id": "7", ...}`.
    """
    document = dict(row.get("doc") or {})
    document["_id"] = str(row["id"])
    return document


def posted_time(now: datetime | None = None) -> str:
    # RFC 1123, e.g. "Mon, 19 Oct 2026 10:00:00 GMT"
    return format_datetime(now or datetime.now(timezone.utc), usegmt=True)


def insert_result(document: dict[str, Any]) -> dict[str, Any]:
    return {"acknowledged": True, "insertedId": document["_id"]}


def update_result(*, modified: bool) -> dict[str, Any]:
    return {"acknowledged": True, "matchedCount": 1, "modifiedCount": int(modified)}
