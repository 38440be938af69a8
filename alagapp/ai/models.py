# -*- coding: utf-8 -*-
"""AI: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class NutritionEstimate(BaseModel):
    description: str
    calories: int = Field(0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    fiber_g: float = Field(0.0, ge=0)
    sugar_g: float = Field(0.0, ge=0)
    sodium_mg: int = Field(0, ge=0)
    serving_size: str = "standard serving"
    confidence: Confidence = Confidence.medium


class NutritionEstimateRequest(BaseModel):
    foodName: Any = Field(default=None, validate_default=True)

    @field_validator("foodName", mode="before")
    @classmethod
    def _valid_food_name(cls, value: Any) -> str:
        if not isinstance(value, str) or len(value.strip()) < 2:
            raise ValueError("Valid food name is required")
        return value.strip()


class MealAnalysisRequest(BaseModel):
    mealName: Optional[str] = None
    description: Optional[str] = None


class MealNutrition(BaseModel):
    calories: int = Field(0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    fiber_g: float = Field(0.0, ge=0)
    description: str = ""
    confidence: Confidence = Confidence.medium


class MealAnalysisResponse(BaseModel):
    success: bool = True
    data: MealNutrition
    source: Literal["ai", "fallback"]


class ChatRequest(BaseModel):
    message: Optional[str] = None
    conversationId: Optional[str] = None


class ChatResponse(BaseModel):
    response: str
    conversationId: str


class ChatMessage(BaseModel):
    id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: str


class ChatMessagesResponse(BaseModel):
    data: List[ChatMessage]


class UsageResponse(BaseModel):
    usage: float = 0
    limit: Optional[float] = None
    isFreeTier: bool = True
    rateLimit: Optional[Any] = None
    label: str = "API Key"
