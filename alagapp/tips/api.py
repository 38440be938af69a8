# -*- coding: utf-8 -*-
"""Tips: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..config import Settings, get_settings
from .catalog import random_tip
from .models import SavedTipResponse, SaveTipRequest, TipCategory, TipResponse
from .storage import delete_tip, save_tip

router = APIRouter(prefix="/api/tips", tags=["Tips"])


@router.get("", response_model=TipResponse, summary="Get a random tip")
def get_tip(category: str | None = Query(default=None)):
    # Unknown categories fall back to a random one.
    known = {c.value for c in TipCategory}
    return TipResponse(tip=random_tip(TipCategory(category) if category in known else None))


@router.post("", response_model=SavedTipResponse, status_code=201, summary="Save a tip")
def post_tip(
    request: SaveTipRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    return SavedTipResponse(data=save_tip(settings.app_db_path, user["id"], request))


@router.delete("", summary="Delete a saved tip")
def remove_tip(
    id: str | None = Query(default=None),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not id:
        raise HTTPException(status_code=400, detail="Tip ID is required")
    delete_tip(settings.app_db_path, user["id"], id)
    return {"message": "Tip deleted"}
