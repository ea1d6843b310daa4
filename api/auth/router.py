"""
Token issuance endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/jwt", response_model=schemas.TokenResponse)
async def get_token(
    email: str = Query(..., min_length=1, max_length=320),
    database: db.Database = Depends(db.get_db),
):
    token = await service.issue_token(database, email)
    if token is None:
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"accessToken": ""})
    return token
