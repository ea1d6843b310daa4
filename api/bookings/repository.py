"""
Booking persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import documents, listing
from core.db import Database


async def insert_booking(database: Database, doc: dict[str, Any]) -> dict:
    row = await database.fetch_one(
        """
        INSERT INTO bookings (doc)
        VALUES ($1)
        RETURNING id, doc
        """,
        doc,
    )
    if row is None:
        raise RuntimeError("Failed to insert booking.")
    return documents.to_document(row)


async def list_bookings(database: Database, plan: listing.ListingQuery) -> list[dict]:
    return await listing.fetch_items(database, plan)


async def toggle_confirmed(database: Database, booking_id: int) -> dict | None:
    row = await database.fetch_one(
        """
        UPDATE bookings
        SET doc = jsonb_set(
            doc,
            '{isConfirmed}',
            to_jsonb(NOT COALESCE(doc->'isConfirmed' = 'true'::jsonb, false))
        )
        WHERE id = $1
        RETURNING id, doc
        """,
        booking_id,
    )
    return documents.to_document(row) if row is not None else None
