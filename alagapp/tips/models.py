# -*- coding: utf-8 -*-
"""Tips: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TipCategory(str, Enum):
    food = "food"
    medical = "medical"
    quick = "quick"
    life = "life"
    fitness = "fitness"


class Tip(BaseModel):
    category: TipCategory
    content: str
    emoji: Optional[str] = None


class TipResponse(BaseModel):
    tip: Tip


class SaveTipRequest(BaseModel):
    category: TipCategory
    content: str = Field(..., min_length=1)
    emoji: Optional[str] = None


class SavedTip(BaseModel):
    id: str
    user_id: str
    category: TipCategory
    content: str
    emoji: Optional[str] = None
    created_at: str


class SavedTipResponse(BaseModel):
    data: SavedTip
