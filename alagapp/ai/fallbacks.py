# -*- coding: utf-8 -*-
"""AI: keyword fallbacks used when no model is available."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

# (keywords, calories, protein_g, carbs_g, fat_g, fiber_g, description); first match wins.
_MEAL_PATTERNS: List[Tuple[Tuple[str, ...], int, float, float, float, float, str]] = [
    # Breakfast
    (("oatmeal", "oat"), 300, 10, 54, 6, 8, "Whole grain oatmeal is high in fiber and provides sustained energy."),
    (("egg", "eggs"), 220, 18, 2, 15, 0, "Eggs are an excellent source of complete protein and essential nutrients."),
    (("pancake",), 350, 8, 45, 14, 2, "Pancakes provide quick energy from carbohydrates."),
    (("toast", "bread"), 160, 5, 30, 2, 2, "Bread provides carbohydrates for energy."),
    (("cereal",), 280, 6, 48, 4, 4, "Cereal with milk provides carbs, protein, and calcium."),
    (("yogurt",), 150, 12, 18, 4, 0, "Yogurt is rich in protein and probiotics for gut health."),
    (("smoothie",), 280, 8, 45, 6, 4, "Smoothies can be nutrient-dense depending on ingredients."),
    # Proteins
    (("chicken",), 335, 38, 12, 14, 2, "Chicken is a lean protein source, low in fat when grilled or baked."),
    (("salmon", "fish"), 380, 34, 8, 22, 1, "Salmon is rich in omega-3 fatty acids and high-quality protein."),
    (("beef", "steak"), 420, 36, 6, 28, 1, "Beef provides iron, zinc, and complete protein."),
    (("pork",), 380, 32, 8, 24, 1, "Pork is a good source of protein and B vitamins."),
    (("turkey",), 300, 34, 8, 12, 2, "Turkey is a lean protein, lower in fat than other meats."),
    (("tofu",), 240, 20, 8, 14, 2, "Tofu is a plant-based protein rich in calcium and iron."),
    (("salad",), 280, 12, 18, 18, 6, "Salads are rich in fiber and vitamins from fresh vegetables."),
    # Carb-heavy meals
    (("pasta", "spaghetti"), 480, 16, 72, 12, 4, "Pasta provides energy from complex carbohydrates."),
    (("rice",), 340, 8, 62, 6, 2, "Rice is a staple carbohydrate source providing quick energy."),
    (("pizza",), 540, 22, 58, 24, 3, "Pizza provides a mix of carbs, protein, and fats."),
    (("burger", "hamburger"), 520, 28, 40, 28, 2, "Burgers provide protein but are often high in saturated fat."),
    (("sandwich",), 380, 20, 42, 14, 3, "Sandwiches can be balanced meals with protein and vegetables."),
    (("wrap", "burrito"), 450, 22, 48, 18, 5, "Wraps can be nutrient-dense with protein and vegetables."),
    (("soup",), 220, 12, 24, 8, 4, "Soup is hydrating and can be rich in vegetables and protein."),
    # Snacks
    (("apple",), 95, 0, 25, 0, 4, "Apples are high in fiber and natural sugars for quick energy."),
    (("banana",), 105, 1, 27, 0, 3, "Bananas are rich in potassium and natural carbohydrates."),
    (("nuts", "almond"), 180, 6, 6, 16, 3, "Nuts provide healthy fats, protein, and fiber."),
    (("protein shake", "protein"), 180, 25, 8, 4, 1, "Protein shakes help meet daily protein requirements."),
    (("cookie", "cookies"), 160, 2, 24, 7, 1, "Cookies are high in sugar and provide quick energy."),
    (("chips",), 220, 3, 24, 13, 2, "Chips are high in sodium and provide carbs from potatoes."),
    # Beverages
    (("coffee",), 5, 0, 1, 0, 0, "Black coffee is very low in calories."),
    (("latte", "cappuccino"), 150, 8, 15, 6, 0, "Coffee with milk provides calcium and protein."),
    (("juice",), 120, 1, 28, 0, 0, "Juice provides vitamins but is high in natural sugars."),
    (("milk",), 150, 8, 12, 8, 0, "Milk provides calcium, protein, and vitamin D."),
]


def fallback_meal_nutrition(meal_name: str) -> Dict[str, Any]:
    name = meal_name.lower()
    for keywords, calories, protein, carbs, fat, fiber, description in _MEAL_PATTERNS:
        if any(k in name for k in keywords):
            return {
                "calories": calories,
                "protein_g": protein,
                "carbs_g": carbs,
                "fat_g": fat,
                "fiber_g": fiber,
                "description": description,
                "confidence": "medium",
            }
    return {
        "calories": 350,
        "protein_g": 15,
        "carbs_g": 40,
        "fat_g": 12,
        "fiber_g": 3,
        "description": (
            "Estimated nutrition for a typical meal. "
            "Adjust values based on actual portion size and ingredients."
        ),
        "confidence": "low",
    }


_CHAT_REPLIES: List[Tuple[Tuple[str, ...], str]] = [
    (
        ("sleep",),
        "Good sleep is essential for health! Adults typically need 7-9 hours. Try maintaining a consistent "
        "sleep schedule, avoiding screens before bed, and keeping your room cool and dark.",
    ),
    (
        ("blood pressure", "bp"),
        "Blood pressure is measured as systolic/diastolic (e.g., 120/80). Normal is under 120/80, elevated is "
        "120-129/<80, and high is 130/80 or above. Regular monitoring helps track your cardiovascular health!",
    ),
    (
        ("water", "hydration"),
        "Staying hydrated is crucial! Most adults need about 8 glasses (2 liters) daily, though this varies by "
        "activity level and climate. Try keeping a water bottle nearby and sipping throughout the day!",
    ),
    (
        ("exercise", "workout"),
        "Regular exercise is great for both physical and mental health! Aim for at least 150 minutes of "
        "moderate activity per week. Mix cardio with strength training for best results.",
    ),
    (
        ("medication", "medicine"),
        "Taking medications consistently is important for their effectiveness. Try setting reminders, keeping "
        "meds visible, or using a pill organizer. AlagApp can help you track your doses!",
    ),
    (
        ("stress", "anxious", "anxiety"),
        "Managing stress is important for overall health. Try deep breathing, regular exercise, adequate sleep, "
        "and mindfulness. If stress feels overwhelming, consider speaking with a mental health professional.",
    ),
    (
        ("energy", "tired", "fatigue"),
        "Low energy can have many causes: sleep quality, nutrition, hydration, stress, or underlying health "
        "issues. Try improving sleep habits and staying hydrated. If fatigue persists, consult your doctor.",
    ),
]

DEFAULT_CHAT_REPLY = (
    "I'm here to help with your health questions! You can ask me about sleep, nutrition, exercise, "
    "medications, stress management, or any other wellness topics."
)


def fallback_chat_reply(message: str) -> str:
    lower = message.lower()
    for keywords, reply in _CHAT_REPLIES:
        if any(k in lower for k in keywords):
            return reply
    return DEFAULT_CHAT_REPLY
