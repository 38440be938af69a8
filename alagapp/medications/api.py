# -*- coding: utf-8 -*-
"""Medications: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..config import Settings, get_settings
from .models import (
    DoseCreateRequest,
    DoseResponse,
    DosesResponse,
    MedicationCreateRequest,
    MedicationResponse,
    MedicationsResponse,
    MedicationUpdateRequest,
    MessageResponse,
)
from .storage import (
    create_dose,
    create_medication,
    delete_medication,
    get_medication,
    list_doses,
    list_medications,
    update_medication,
)

router = APIRouter(prefix="/api/medications", tags=["Medications"])


@router.get("", response_model=MedicationsResponse, summary="List medications")
def get_medications(
    active: str | None = Query(default=None, description="'true' to list active medications only"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    data = list_medications(settings.app_db_path, user["id"], active_only=active == "true")
    return MedicationsResponse(data=data)


@router.post("", response_model=MedicationResponse, status_code=201, summary="Add a medication")
def post_medication(
    request: MedicationCreateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    return MedicationResponse(data=create_medication(settings.app_db_path, user["id"], request))


@router.patch("", response_model=MedicationResponse, summary="Update a medication")
def patch_medication(
    request: MedicationUpdateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not request.id:
        raise HTTPException(status_code=400, detail="Medication ID is required")
    updates = request.model_dump(exclude_unset=True, exclude={"id"})
    medication = update_medication(settings.app_db_path, user["id"], request.id, updates)
    if not medication:
        raise HTTPException(status_code=404, detail="Medication not found")
    return MedicationResponse(data=medication)


@router.delete("", response_model=MessageResponse, summary="Delete a medication")
def remove_medication(
    id: str | None = Query(default=None),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not id:
        raise HTTPException(status_code=400, detail="Medication ID is required")
    delete_medication(settings.app_db_path, user["id"], id)
    return MessageResponse(message="Medication deleted")


@router.post("/doses", response_model=DoseResponse, status_code=201, summary="Log a medication dose")
def post_dose(
    request: DoseCreateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not get_medication(settings.app_db_path, user["id"], request.medication_id):
        raise HTTPException(status_code=404, detail="Medication not found")
    return DoseResponse(data=create_dose(settings.app_db_path, user["id"], request))


@router.get("/doses", response_model=DosesResponse, summary="List logged doses")
def get_doses(
    date: str | None = Query(default=None, description="YYYY-MM-DD of the scheduled time"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    return DosesResponse(data=list_doses(settings.app_db_path, user["id"], date=date))
