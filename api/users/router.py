"""
User API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter()


@router.get("/users")
async def list_users(
    params: Annotated[schemas.UserListParams, Query()],
    database: db.Database = Depends(db.get_db),
    _: dict = Depends(auth_dependencies.require_admin),
) -> list[dict]:
    return await service.list_users(database, params)


@router.get("/users/admin/{email}", response_model=schemas.AdminCheckResponse)
async def check_admin(
    email: str,
    database: db.Database = Depends(db.get_db),
) -> schemas.AdminCheckResponse:
    return schemas.AdminCheckResponse(is_admin=await service.is_admin(database, email))


@router.get("/users/{email}")
async def get_user(
    email: str,
    database: db.Database = Depends(db.get_db),
) -> dict:
    return await service.get_user(database, email)


@router.post("/users")
async def register_user(
    payload: schemas.UserCreate,
    database: db.Database = Depends(db.get_db),
) -> dict:
    return await service.register_user(database, payload)


@router.put("/users/status/{user_id}")
async def set_user_status(
    user_id: str,
    status: str = Query(..., min_length=1, max_length=50),
    database: db.Database = Depends(db.get_db),
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.set_status(database, user_id, status)


@router.put("/users/{user_id}")
async def update_user(
    user_id: str,
    payload: schemas.UserUpdate,
    database: db.Database = Depends(db.get_db),
    _: str = Depends(auth_dependencies.get_current_email),
) -> dict:
    return await service.update_user(database, user_id, payload)
