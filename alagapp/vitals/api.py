# -*- coding: utf-8 -*-
"""Vitals: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..config import Settings, get_settings
from .models import VitalCreateRequest, VitalResponse, VitalsResponse, VitalType
from .storage import create_vital, delete_vital, list_vitals

router = APIRouter(prefix="/api/vitals", tags=["Vitals"])


@router.get("", response_model=VitalsResponse, summary="List recent vitals")
def get_vitals(
    limit: int = Query(default=20, ge=1, le=500),
    type: VitalType | None = Query(default=None),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    vital_type = type.value if type else None
    return VitalsResponse(data=list_vitals(settings.app_db_path, user["id"], limit=limit, vital_type=vital_type))


@router.post("", response_model=VitalResponse, status_code=201, summary="Record a vital")
def post_vital(
    request: VitalCreateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    return VitalResponse(data=create_vital(settings.app_db_path, user["id"], request))


@router.delete("", summary="Delete a vital")
def remove_vital(
    id: str | None = Query(default=None),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not id:
        raise HTTPException(status_code=400, detail="Vital ID is required")
    delete_vital(settings.app_db_path, user["id"], id)
    return {"message": "Vital deleted"}
