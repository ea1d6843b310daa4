"""
Booking API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter()


@router.post("/bookings")
async def create_booking(
    payload: schemas.BookingCreate,
    database: db.Database = Depends(db.get_db),
    _: str = Depends(auth_dependencies.get_current_email),
) -> dict:
    return await service.create_booking(database, payload)


@router.get("/bookings")
async def list_bookings(
    params: Annotated[schemas.BookingListParams, Query()],
    database: db.Database = Depends(db.get_db),
) -> list[dict]:
    return await service.list_bookings(database, params)


@router.put("/bookings/status/{booking_id}")
async def toggle_booking_confirmed(
    booking_id: str,
    database: db.Database = Depends(db.get_db),
    _: str = Depends(auth_dependencies.get_current_email),
) -> dict:
    return await service.toggle_confirmed(database, booking_id)
