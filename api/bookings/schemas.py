"""
Pydantic schemas for booking endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.listing import MAX_PAGE_SIZE


class BookingCreate(BaseModel):
    # Meeting details (location, phone, price...) are stored as sent.
    model_config = ConfigDict(extra="allow")

    productId: str = Field(..., min_length=1, max_length=100)
    userEmail: str = Field(..., min_length=3, max_length=320)
    isConfirmed: bool = False


class BookingListParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    userEmail: str | None = Field(default=None, max_length=320)
    productId: str | None = Field(default=None, max_length=100)
    # When set, both userEmail and productId must be given.
    required: bool = False
    page: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, ge=1, le=MAX_PAGE_SIZE)
