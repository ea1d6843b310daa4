"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADMIN_STATUS = "Admin"


class UserCreate(BaseModel):
    # Profile fields beyond these are stored as sent.
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=3, max_length=320)
    name: str | None = Field(default=None, max_length=200)
    mobile: str | None = Field(default=None, max_length=50)
    img: str | None = Field(default=None, max_length=2000)
    status: str | None = Field(default=None, max_length=50)


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str | None = Field(default=None, min_length=3, max_length=320)
    name: str | None = Field(default=None, max_length=200)
    mobile: str | None = Field(default=None, max_length=50)
    img: str | None = Field(default=None, max_length=2000)

    @field_validator("email")
    @classmethod
    def _email_not_null(cls, value: str | None) -> str:
        # Omit email to keep it; null would orphan the account.
        if value is None:
            raise ValueError("email cannot be null.")
        return value


class UserListParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str | None = Field(default=None, max_length=50)
    search: str | None = Field(default=None, max_length=320)


class AdminCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_admin: bool = Field(..., alias="isAdmin")
