# -*- coding: utf-8 -*-
"""Tips: built-in catalog."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from .models import Tip, TipCategory

# category -> [(content, emoji)]
TIPS: Dict[TipCategory, List[Tuple[str, str]]] = {
    TipCategory.food: [
        ("Eating protein with breakfast can help stabilize blood sugar levels and reduce mid-morning cravings.", "🥗"),
        ("Drinking water 30 minutes before meals can aid digestion and help with portion control.", "💧"),
        ("Colorful vegetables contain different nutrients - aim for a variety of colors on your plate.", "🌈"),
    ],
    TipCategory.medical: [
        ("Taking medications at the same time each day helps build a consistent routine and improves adherence.", "💊"),
        ("Blood pressure readings are most accurate when taken at the same time daily, after resting for 5 minutes.", "❤️"),
        ("Keep a list of your medications in your wallet for emergencies.", "📋"),
    ],
    TipCategory.quick: [
        ("The 20-20-20 rule: every 20 minutes, look at something 20 feet away for 20 seconds to reduce eye strain.", "👀"),
        ("Stand up and stretch for 1 minute every hour to improve circulation and reduce stiffness.", "🧘"),
        ("Take 3 deep breaths whenever you feel stressed; it activates your parasympathetic nervous system.", "😮‍💨"),
    ],
    TipCategory.life: [
        ("Try the 4-7-8 breathing technique before bed: inhale 4 seconds, hold 7, exhale 8 for better sleep.", "🌙"),
        ("Morning sunlight exposure within 30 minutes of waking helps regulate your circadian rhythm.", "☀️"),
        ("Gratitude journaling for 5 minutes daily can improve mental well-being and sleep quality.", "📝"),
    ],
    TipCategory.fitness: [
        ("Just 10 minutes of walking counts as exercise and adds up throughout the day.", "🚶"),
        ("Rest days are when your muscles actually grow; they are as important as workout days.", "💪"),
        ("Warming up for 5 minutes before exercise can prevent injuries and improve performance.", "🔥"),
    ],
}


def random_tip(category: Optional[TipCategory] = None, rng: Optional[random.Random] = None) -> Tip:
    """Pick a tip from `category`, or from a random category when none is given."""
    rng = rng or random
    if category is None:
        category = rng.choice(list(TIPS))
    content, emoji = rng.choice(TIPS[category])
    return Tip(category=category, content=content, emoji=emoji)
