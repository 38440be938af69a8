# -*- coding: utf-8 -*-
"""AI: nutrition estimates from a language model."""

from __future__ import annotations

from typing import Callable

from .gemini import GeminiClient
from .models import NutritionEstimate
from .normalizer import parse_nutrition_text
from .openrouter import OpenRouterClient

_SCHEMA_LINE = (
    '{"description":"brief description with serving size","calories":number,"protein_g":number,'
    '"carbs_g":number,"fat_g":number,"fiber_g":number,"sugar_g":number,"sodium_mg":number,'
    '"serving_size":"serving description","confidence":"high or medium or low"}'
)


def openrouter_prompt(food_name: str) -> str:
    return (
        f'You are a nutrition database assistant. Provide accurate nutritional information for: "{food_name}"\n\n'
        "Return ONLY a valid JSON object (no markdown, no explanation, no code blocks) with these exact fields:\n"
        f"{_SCHEMA_LINE}\n\n"
        'Use USDA data standards. For common foods use "high" confidence, dishes use "medium", '
        'unusual items use "low".\n'
        "Return ONLY the JSON object, nothing else."
    )


def gemini_prompt(food_name: str) -> str:
    return (
        "You are a certified nutritionist database assistant. "
        f'Provide accurate nutritional information for: "{food_name}"\n\n'
        "IMPORTANT: Use data based on USDA FoodData Central standards. "
        "Provide values for a STANDARD SINGLE SERVING.\n\n"
        "Return ONLY a valid JSON object with these exact fields (no markdown, no code blocks, no extra text):\n"
        f"{_SCHEMA_LINE}\n\n"
        "Guidelines:\n"
        "- calories: total kilocalories\n"
        "- protein_g, carbs_g, fat_g, fiber_g, sugar_g: in grams (1 decimal)\n"
        "- sodium_mg: in milligrams\n"
        '- confidence: "high" for common foods, "medium" for dishes, "low" for unusual items\n'
        "- Use realistic portions (e.g., 1 medium apple, 1 chicken breast, 1 cup rice)\n\n"
        'Example for "banana":\n'
        '{"description":"1 medium banana, raw (118g)","calories":105,"protein_g":1.3,"carbs_g":27.0,'
        '"fat_g":0.4,"fiber_g":3.1,"sugar_g":14.4,"sodium_mg":1,"serving_size":"1 medium (118g)",'
        '"confidence":"high"}\n\n'
        f'Now provide accurate JSON for: "{food_name}"'
    )


def estimate_nutrition(food_name: str, complete: Callable[[str], str]) -> NutritionEstimate:
    """Ask a model for one food's nutrition and normalize the reply.

    `complete` takes the food name and returns raw completion text. AIProviderError
    from it propagates unchanged; unusable text raises NutritionParseError.
    """
    return parse_nutrition_text(complete(food_name), food_name)


def estimate_with_openrouter(client: OpenRouterClient, food_name: str) -> NutritionEstimate:
    return estimate_nutrition(
        food_name,
        lambda name: client.complete([{"role": "user", "content": openrouter_prompt(name)}], temperature=0.3),
    )


def estimate_with_gemini(client: GeminiClient, food_name: str) -> NutritionEstimate:
    return estimate_nutrition(food_name, lambda name: client.generate(gemini_prompt(name)))
