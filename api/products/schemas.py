"""
Pydantic schemas for product endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.listing import MAX_PAGE_SIZE


class ProductCreate(BaseModel):
    # Listing details (price, condition, images...) are stored as sent.
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=300)
    district: str = Field(..., min_length=1, max_length=100)
    categoryId: str = Field(..., min_length=1, max_length=100)
    userEmail: str = Field(..., min_length=3, max_length=320)
    isSold: bool = False


class ProductListParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    district: str | None = Field(default=None, max_length=100)
    categoryId: str | None = Field(default=None, max_length=100)
    search: str | None = Field(default=None, max_length=300)
    email: str | None = Field(default=None, max_length=320)
    page: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, ge=1, le=MAX_PAGE_SIZE)
