"""
Product persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import documents, listing
from core.db import Database


async def insert_product(database: Database, doc: dict[str, Any]) -> dict:
    row = await database.fetch_one(
        """
        INSERT INTO products (doc)
        VALUES ($1)
        RETURNING id, doc
        """,
        doc,
    )
    if row is None:
        raise RuntimeError("Failed to insert product.")
    return documents.to_document(row)


async def list_products(database: Database, plan: listing.ListingQuery) -> list[dict]:
    return await listing.fetch_items(database, plan)


async def count_products(database: Database, plan: listing.ListingQuery) -> int:
    return await listing.count_items(database, plan)


async def get_product(database: Database, product_id: int) -> dict | None:
    row = await database.fetch_one(
        """
        SELECT id, doc
        FROM products
        WHERE id = $1
        """,
        product_id,
    )
    return documents.to_document(row) if row is not None else None


async def toggle_sold(database: Database, product_id: int) -> dict | None:
    """
    Flip `isSold` in one statement; anything but JSON true counts as false.
    """
    row = await database.fetch_one(
        """
        UPDATE products
        SET doc = jsonb_set(
            doc,
            '{isSold}',
            to_jsonb(NOT COALESCE(doc->'isSold' = 'true'::jsonb, false))
        )
        WHERE id = $1
        RETURNING id, doc
        """,
        product_id,
    )
    return documents.to_document(row) if row is not None else None
