# -*- coding: utf-8 -*-
"""AI: provider error type and rate-limit detection."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_RETRY_AFTER = 60

_RETRY_IN_RE = re.compile(r"retry in (\d+(?:\.\d+)?)", re.IGNORECASE)
_RATE_WORD_RE = re.compile(r"\brate\b|rate_?limit", re.IGNORECASE)


@dataclass(frozen=True)
class RateLimitInfo:
    is_rate_limit: bool
    retry_after: int


class AIProviderError(Exception):
    """An upstream model call failed (network, non-success status, rate limit)."""

    def __init__(self, message: str, *, is_rate_limit: bool = False, retry_after: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.is_rate_limit = is_rate_limit
        self.retry_after = retry_after

    @classmethod
    def from_message(cls, message: str, status_code: Optional[int] = None) -> "AIProviderError":
        info = detect_rate_limit(message, status_code)
        return cls(
            message,
            is_rate_limit=info.is_rate_limit,
            retry_after=info.retry_after if info.is_rate_limit else None,
        )


def parse_retry_after(message: str, default: int = DEFAULT_RETRY_AFTER) -> int:
    """Seconds from a "retry in N" phrase (ceiling), else `default`."""
    m = _RETRY_IN_RE.search(message or "")
    if not m:
        return default
    try:
        return int(math.ceil(float(m.group(1))))
    except (ValueError, OverflowError):
        return default


def is_rate_limit_message(message: str, status_code: Optional[int] = None) -> bool:
    if status_code == 429:
        return True
    text = message or ""
    return (
        "429" in text
        or "quota" in text.lower()
        or "too many requests" in text.lower()
        or _RATE_WORD_RE.search(text) is not None
    )


def detect_rate_limit(message: str, status_code: Optional[int] = None) -> RateLimitInfo:
    return RateLimitInfo(
        is_rate_limit=is_rate_limit_message(message, status_code),
        retry_after=parse_retry_after(message),
    )
