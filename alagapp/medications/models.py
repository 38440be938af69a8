# -*- coding: utf-8 -*-
"""Medications: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class Frequency(str, Enum):
    daily = "daily"
    twice_daily = "twice_daily"
    three_times_daily = "three_times_daily"
    weekly = "weekly"
    as_needed = "as_needed"


DoseStatus = Literal["taken", "skipped", "missed"]


def _required(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value.strip()


def _schedule(value: List[str]) -> List[str]:
    if not value:
        raise ValueError("At least one schedule time is required")
    return value


class MedicationCreateRequest(BaseModel):
    name: str
    dosage: str
    dosage_unit: str = "mg"
    frequency: Frequency
    schedule_times: List[str]
    instructions: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        return _required(value, "Medication name is required")

    @field_validator("dosage")
    @classmethod
    def _dosage_required(cls, value: str) -> str:
        return _required(value, "Dosage is required")

    @field_validator("schedule_times")
    @classmethod
    def _schedule_required(cls, value: List[str]) -> List[str]:
        return _schedule(value)


class MedicationUpdateRequest(BaseModel):
    """PATCH body: `id` plus any subset of the editable columns; other keys are ignored."""

    id: Optional[str] = None
    name: Optional[str] = None
    dosage: Optional[str] = None
    dosage_unit: Optional[str] = None
    frequency: Optional[Frequency] = None
    schedule_times: Optional[List[str]] = None
    instructions: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _required(value, "Medication name is required")

    @field_validator("dosage")
    @classmethod
    def _dosage_required(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _required(value, "Dosage is required")

    @field_validator("schedule_times")
    @classmethod
    def _schedule_required(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return None if value is None else _schedule(value)


class Medication(BaseModel):
    id: str
    user_id: str
    name: str
    dosage: str
    dosage_unit: str
    frequency: Frequency
    schedule_times: List[str] = Field(default_factory=list)
    instructions: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: bool = True
    created_at: str


class MedicationResponse(BaseModel):
    data: Medication


class MedicationsResponse(BaseModel):
    data: List[Medication]


class DoseCreateRequest(BaseModel):
    medication_id: str = Field(..., min_length=1)
    status: DoseStatus
    scheduled_time: str
    taken_at: Optional[str] = None
    notes: Optional[str] = None


class MedicationDose(BaseModel):
    id: str
    user_id: str
    medication_id: str
    status: DoseStatus
    scheduled_time: str
    taken_at: Optional[str] = None
    notes: Optional[str] = None
    created_at: str


class DoseResponse(BaseModel):
    data: MedicationDose


class DosesResponse(BaseModel):
    data: List[MedicationDose]


class MessageResponse(BaseModel):
    message: str
