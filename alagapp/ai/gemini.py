# -*- coding: utf-8 -*-
"""AI: Google Gemini text generation."""

from __future__ import annotations

import logging
from typing import Optional

import google.generativeai as genai

from ..config import Settings
from .errors import AIProviderError

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, *, api_key: Optional[str], model: str) -> None:
        self.api_key = api_key
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(api_key=settings.gemini_api_key, model=settings.gemini_model)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise AIProviderError("API key not configured")
        try:
            genai.configure(api_key=self.api_key)
            model = genai.GenerativeModel(self.model)
            response = model.generate_content(prompt)
            return response.text
        except Exception as exc:
            message = str(exc) or "Failed to get nutrition data"
            logger.error("Gemini error: %s", message)
            code = getattr(exc, "code", None)
            raise AIProviderError.from_message(message, code if isinstance(code, int) else None) from exc
