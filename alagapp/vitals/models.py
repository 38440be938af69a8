# -*- coding: utf-8 -*-
"""Vitals: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class VitalType(str, Enum):
    blood_pressure = "blood_pressure"
    heart_rate = "heart_rate"
    weight = "weight"
    sleep_hours = "sleep_hours"
    blood_glucose = "blood_glucose"
    oxygen_saturation = "oxygen_saturation"
    temperature = "temperature"
    height = "height"


class BloodPressureValue(BaseModel):
    systolic: float = Field(..., ge=60, le=250)
    diastolic: float = Field(..., ge=40, le=150)


class SingleValue(BaseModel):
    value: float


class VitalCreateRequest(BaseModel):
    vital_type: VitalType
    value: Union[BloodPressureValue, SingleValue]
    notes: Optional[str] = None
    recorded_at: Optional[datetime] = None


class Vital(BaseModel):
    id: str
    user_id: str
    vital_type: VitalType
    value: Dict[str, float]
    notes: Optional[str] = None
    recorded_at: str


class VitalResponse(BaseModel):
    data: Vital


class VitalsResponse(BaseModel):
    data: List[Vital]
