# -*- coding: utf-8 -*-
"""AI: normalize free-form model output into a nutrition record.

Model output is not guaranteed to be well-formed JSON: it may be wrapped in
markdown fences or surrounded by prose. Once a JSON object is found, every
field is coerced to a typed value with a default, so callers never see a
missing field.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Dict, List, Optional

from .models import Confidence, NutritionEstimate

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Could not parse nutrition data"

DECIMAL_FIELDS = ("protein_g", "carbs_g", "fat_g", "fiber_g", "sugar_g")
INTEGER_FIELDS = ("calories", "sodium_mg")

_NUM_RE = re.compile(r"-?\d+(?:\.\d+)?")


class NutritionParseError(ValueError):
    """Model text was fetched but is not a JSON object."""


def strip_code_fences(text: str) -> str:
    cleaned = (text or "").strip()
    cleaned = re.sub(r"^```[\w-]*", "", cleaned, flags=re.IGNORECASE)
    cleaned = re.sub(r"```$", "", cleaned)
    return cleaned.strip()


def _iter_balanced_objects(text: str) -> List[str]:
    """Balanced {...} candidates, respecting string literals.

    Quotes outside any object are prose (an inch mark, a quoted word) and
    do not open a string.
    """
    candidates: List[str] = []
    in_str = False
    escaped = False
    depth = 0
    start_idx: Optional[int] = None

    for i, ch in enumerate(text):
        if in_str:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == "\"":
                in_str = False
            continue

        if ch == "\"":
            in_str = depth > 0
            continue

        if ch == "{":
            if depth == 0:
                start_idx = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0 and start_idx is not None:
                candidates.append(text[start_idx : i + 1])
                start_idx = None

    return candidates


def extract_json_object(text: str) -> Dict[str, Any]:
    """Find and parse the JSON object embedded in model output.

    The first `{` through the last `}` is tried first; when that span does not
    parse (stray braces in commentary), balanced candidates are tried in order.
    """
    cleaned = strip_code_fences(text)

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    candidates: List[str] = []
    if start != -1 and end > start:
        candidates.append(cleaned[start : end + 1])
        candidates.extend(c for c in _iter_balanced_objects(cleaned) if c != candidates[0])
    else:
        candidates.append(cleaned)

    last_error: Optional[Exception] = None
    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except ValueError as exc:
            last_error = exc
            continue
        if isinstance(parsed, dict):
            return parsed
        last_error = ValueError(f"expected a JSON object, got {type(parsed).__name__}")

    raise NutritionParseError(PARSE_ERROR_MESSAGE) from last_error


def to_number(value: Any) -> float:
    """Convert to a finite float; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            m = _NUM_RE.search(value.replace(",", ""))
            if not m:
                return 0.0
            number = float(m.group(0))
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def round_decimal(value: Any) -> float:
    return max(0.0, round_half_up(to_number(value) * 10) / 10)


def round_integer(value: Any) -> int:
    return max(0, round_half_up(to_number(value)))


def normalize_confidence(value: Any) -> Confidence:
    if isinstance(value, str):
        key = value.strip().lower()
        if key in Confidence.__members__:
            return Confidence(key)
    return Confidence.medium


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def normalize_nutrition(data: Dict[str, Any], food_name: str) -> NutritionEstimate:
    record: Dict[str, Any] = {
        "description": _text_or(data.get("description"), f"{food_name} - standard serving"),
        "serving_size": _text_or(data.get("serving_size"), "standard serving"),
        "confidence": normalize_confidence(data.get("confidence")),
    }
    for key in INTEGER_FIELDS:
        record[key] = round_integer(data.get(key))
    for key in DECIMAL_FIELDS:
        record[key] = round_decimal(data.get(key))
    return NutritionEstimate(**record)


def parse_nutrition_text(text: str, food_name: str) -> NutritionEstimate:
    """Raw completion text -> NutritionEstimate; raises NutritionParseError."""
    try:
        data = extract_json_object(text)
    except NutritionParseError:
        logger.warning("Failed to parse nutrition data; raw content: %.500s", text)
        raise
    return normalize_nutrition(data, food_name)
