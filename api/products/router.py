"""
Product API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter()


@router.post("/products")
async def create_product(
    payload: schemas.ProductCreate,
    database: db.Database = Depends(db.get_db),
    _: str = Depends(auth_dependencies.get_current_email),
) -> dict:
    return await service.create_product(database, payload)


@router.get("/products")
async def list_products(
    params: Annotated[schemas.ProductListParams, Query()],
    database: db.Database = Depends(db.get_db),
) -> dict:
    """
    Newest first. Without `size` every matching product is returned.
    """
    return await service.list_products(database, params)


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    database: db.Database = Depends(db.get_db),
) -> dict:
    return await service.get_product(database, product_id)


@router.put("/products/status/{product_id}")
async def toggle_product_sold(
    product_id: str,
    database: db.Database = Depends(db.get_db),
    _: str = Depends(auth_dependencies.get_current_email),
) -> dict:
    return await service.toggle_sold(database, product_id)
