# -*- coding: utf-8 -*-
"""Check-ins: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CheckInRequest(BaseModel):
    mood: int = Field(..., ge=1, le=5)
    energy: int = Field(..., ge=1, le=5)
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None


class CheckIn(BaseModel):
    id: str
    user_id: str
    check_in_date: str = Field(..., description="YYYY-MM-DD (UTC)")
    mood: int
    energy: int
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: str


class CheckInsResponse(BaseModel):
    data: List[CheckIn]


class CheckInResponse(BaseModel):
    data: CheckIn
