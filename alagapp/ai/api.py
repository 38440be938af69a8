# -*- coding: utf-8 -*-
"""AI: API endpoints (nutrition estimates, meal analysis, assistant chat)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from ..auth.security import get_current_user
from ..config import Settings, get_settings
from .errors import DEFAULT_RETRY_AFTER, AIProviderError
from .fallbacks import fallback_chat_reply, fallback_meal_nutrition
from .gemini import GeminiClient
from .models import (
    ChatMessage,
    ChatMessagesResponse,
    ChatRequest,
    ChatResponse,
    MealAnalysisRequest,
    MealAnalysisResponse,
    MealNutrition,
    NutritionEstimate,
    NutritionEstimateRequest,
    UsageResponse,
)
from .normalizer import PARSE_ERROR_MESSAGE, NutritionParseError, extract_json_object, normalize_confidence, to_number
from .nutrition import estimate_with_gemini, estimate_with_openrouter
from .openrouter import OpenRouterClient
from .storage import append_message, create_conversation, get_conversation, list_messages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI"])
nutrition_router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])

ASSISTANT_SYSTEM_PROMPT = """You are Faith, a friendly and supportive AI health assistant for AlagApp - a personal health tracking application.

Your personality:
- Warm, encouraging, and supportive
- Knowledgeable about general health and wellness
- Always recommend consulting healthcare professionals for medical concerns
- Help users understand their health data and habits
- Provide practical, actionable wellness tips

What you should NOT do:
- Diagnose medical conditions
- Prescribe medications or treatments
- Provide emergency medical advice
- Make specific medical recommendations

Keep responses concise (under 150 words) unless the user asks for detailed information."""

_HISTORY_LIMIT = 10


def get_openrouter_client(settings: Settings = Depends(get_settings)) -> OpenRouterClient:
    return OpenRouterClient.from_settings(settings)


def get_openrouter_chat_client(settings: Settings = Depends(get_settings)) -> OpenRouterClient:
    return OpenRouterClient.from_settings(settings, model=settings.openrouter_chat_model)


def get_meal_analysis_client(settings: Settings = Depends(get_settings)) -> OpenRouterClient:
    return OpenRouterClient.from_settings(
        settings, model=settings.openrouter_chat_model, title="AlagApp Nutrition Analyzer"
    )


def get_gemini_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient.from_settings(settings)


def _estimate_or_error(estimate: Callable[[], NutritionEstimate]):
    try:
        return estimate()
    except AIProviderError as exc:
        if exc.is_rate_limit:
            return JSONResponse(
                status_code=429,
                content={
                    "error": exc.message,
                    "isRateLimit": True,
                    "retryAfter": exc.retry_after or DEFAULT_RETRY_AFTER,
                },
            )
        raise HTTPException(status_code=500, detail=exc.message) from exc
    except NutritionParseError as exc:
        raise HTTPException(status_code=500, detail=PARSE_ERROR_MESSAGE) from exc


# ==================== Nutrition estimates ====================


def _require_food_name(request: Optional[NutritionEstimateRequest]) -> str:
    # A missing body never reaches the model validator.
    if request is None:
        raise HTTPException(status_code=400, detail="Valid food name is required")
    return request.foodName


@router.post("/nutrition", response_model=NutritionEstimate, summary="Nutrition estimate via OpenRouter")
def ai_nutrition(
    request: Optional[NutritionEstimateRequest] = None,
    client: OpenRouterClient = Depends(get_openrouter_client),
):
    food_name = _require_food_name(request)
    return _estimate_or_error(lambda: estimate_with_openrouter(client, food_name))


@nutrition_router.post("", response_model=NutritionEstimate, summary="Nutrition estimate via Gemini")
def gemini_nutrition(
    request: Optional[NutritionEstimateRequest] = None,
    client: GeminiClient = Depends(get_gemini_client),
):
    food_name = _require_food_name(request)
    if not client.configured:
        raise HTTPException(status_code=500, detail="API key not configured")
    return _estimate_or_error(lambda: estimate_with_gemini(client, food_name))


# ==================== Meal analysis ====================


def _meal_prompt(meal_name: str, description: Optional[str]) -> str:
    meal = f"Meal: {meal_name}"
    if description:
        meal += f"\nDescription: {description}"
    return (
        "You are a professional nutritionist AI. Analyze the following meal and provide accurate "
        f"nutritional information.\n\n{meal}\n\n"
        "Provide a JSON response with the following structure (numbers only, no units in values):\n"
        '{"calories": <number between 50-1500>, "protein_g": <number>, "carbs_g": <number>, '
        '"fat_g": <number>, "fiber_g": <number>, '
        '"description": "<brief 1-2 sentence description of the meal and its nutritional benefits>", '
        '"confidence": "<high/medium/low based on how specific the meal name is>"}\n\n'
        "Important guidelines:\n"
        "- Base estimates on standard serving sizes\n"
        "- Use USDA food database standards for accuracy\n"
        "- For combination meals, sum the components\n"
        "- If the meal is vague, provide a reasonable middle estimate\n\n"
        "Respond ONLY with the JSON object, no additional text."
    )


def _clamp(value: Any, upper: float) -> float:
    return max(0.0, min(upper, to_number(value)))


def clamp_meal_nutrition(data: Dict[str, Any]) -> MealNutrition:
    description = data.get("description")
    return MealNutrition(
        calories=int(_clamp(data.get("calories"), 3000)),
        protein_g=_clamp(data.get("protein_g"), 200),
        carbs_g=_clamp(data.get("carbs_g"), 500),
        fat_g=_clamp(data.get("fat_g"), 200),
        fiber_g=_clamp(data.get("fiber_g"), 100),
        description=description if isinstance(description, str) else "",
        confidence=normalize_confidence(data.get("confidence")),
    )


@router.post("/meal-analysis", response_model=MealAnalysisResponse, summary="Analyze a meal")
def meal_analysis(
    request: MealAnalysisRequest,
    client: OpenRouterClient = Depends(get_meal_analysis_client),
):
    meal_name = (request.mealName or "").strip()
    if not meal_name:
        raise HTTPException(status_code=400, detail="Meal name is required")

    fallback = MealAnalysisResponse(data=MealNutrition(**fallback_meal_nutrition(meal_name)), source="fallback")
    if not client.configured:
        return fallback

    try:
        content = client.complete(
            [{"role": "user", "content": _meal_prompt(meal_name, request.description)}],
            max_tokens=500,
            temperature=0.3,
        )
        data = extract_json_object(content)
    except AIProviderError as exc:
        logger.warning("Meal analysis upstream error: %s", exc)
        return fallback
    except NutritionParseError as exc:
        logger.warning("Failed to parse meal analysis response: %s", exc)
        return fallback

    return MealAnalysisResponse(data=clamp_meal_nutrition(data), source="ai")


# ==================== Assistant chat ====================


@router.post("/chat", response_model=ChatResponse, summary="Chat with the health assistant")
def chat(
    request: ChatRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    client: OpenRouterClient = Depends(get_openrouter_chat_client),
):
    message = (request.message or "").strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    db_path = settings.app_db_path
    if request.conversationId:
        conversation = get_conversation(db_path, user_id=user["id"], conversation_id=request.conversationId)
        if not conversation:
            raise HTTPException(status_code=404, detail="Conversation not found")
    else:
        conversation = create_conversation(db_path, user_id=user["id"], title=message)

    append_message(db_path, user_id=user["id"], conversation_id=conversation["id"], role="user", content=message)

    reply = None
    if client.configured:
        history = list_messages(db_path, conversation_id=conversation["id"], limit=_HISTORY_LIMIT)
        messages: List[Dict[str, str]] = [{"role": "system", "content": ASSISTANT_SYSTEM_PROMPT}]
        messages.extend({"role": m["role"], "content": m["content"]} for m in history)
        try:
            reply = client.complete(messages, max_tokens=500, temperature=0.7)
        except AIProviderError as exc:
            logger.warning("AI chat error, using fallback reply: %s", exc)
    if not reply:
        reply = fallback_chat_reply(message)

    append_message(db_path, user_id=user["id"], conversation_id=conversation["id"], role="assistant", content=reply)
    return ChatResponse(response=reply, conversationId=conversation["id"])


@router.get("/messages", response_model=ChatMessagesResponse, summary="Messages of a conversation")
def messages(
    conversationId: Optional[str] = Query(default=None),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    if not conversationId:
        raise HTTPException(status_code=400, detail="Conversation ID required")
    if not get_conversation(settings.app_db_path, user_id=user["id"], conversation_id=conversationId):
        raise HTTPException(status_code=404, detail="Conversation not found")
    rows = list_messages(settings.app_db_path, conversation_id=conversationId)
    return ChatMessagesResponse(data=[ChatMessage(**r) for r in rows])


@router.get("/usage", response_model=UsageResponse, summary="OpenRouter key usage")
def usage(client: OpenRouterClient = Depends(get_openrouter_client)):
    if not client.configured:
        raise HTTPException(status_code=500, detail="API key not configured")
    try:
        info = client.key_info()
    except AIProviderError as exc:
        raise HTTPException(status_code=500, detail=exc.message) from exc
    return UsageResponse(
        usage=info.get("usage") or 0,
        limit=info.get("limit"),
        isFreeTier=bool(info.get("is_free_tier", True)),
        rateLimit=info.get("rate_limit"),
        label=info.get("label") or "API Key",
    )
