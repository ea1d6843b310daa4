"""
Category persistence (read-only).
"""

from __future__ import annotations

from core import documents
from core.db import Database


async def list_categories(database: Database) -> list[dict]:
    rows = await database.fetch_all(
        """
        SELECT id, doc
        FROM categories
        ORDER BY id ASC
        """
    )
    return [documents.to_document(row) for row in rows]
