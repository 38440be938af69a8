# -*- coding: utf-8 -*-
"""Check-ins: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from ..auth.security import get_current_user
from ..config import Settings, get_settings
from .models import CheckInRequest, CheckInResponse, CheckInsResponse
from .storage import list_check_ins, upsert_today_check_in

router = APIRouter(prefix="/api/check-ins", tags=["Check-ins"])


@router.get("", response_model=CheckInsResponse, summary="List recent check-ins")
def get_check_ins(
    limit: int = Query(default=7, ge=1, le=365),
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    return CheckInsResponse(data=list_check_ins(settings.app_db_path, user["id"], limit=limit, date=date))


@router.post("", summary="Check in for today (updates an existing check-in)")
def post_check_in(
    request: CheckInRequest,
    response: Response,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    check_in, updated = upsert_today_check_in(settings.app_db_path, user["id"], request)
    if updated:
        return {"data": check_in, "updated": True}
    response.status_code = 201
    return CheckInResponse(data=check_in)
