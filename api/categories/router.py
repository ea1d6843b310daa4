"""
Category API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core import db

from . import repository

router = APIRouter()


@router.get("/categories")
async def list_categories(database: db.Database = Depends(db.get_db)) -> list[dict]:
    return await repository.list_categories(database)
