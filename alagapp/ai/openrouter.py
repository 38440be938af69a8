# -*- coding: utf-8 -*-
"""AI: OpenRouter chat-completions client (OpenAI-compatible)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings
from .errors import DEFAULT_RETRY_AFTER, AIProviderError

logger = logging.getLogger(__name__)


class OpenRouterClient:
    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: str,
        model: str,
        timeout: float,
        app_url: str,
        title: str = "AlagApp Health Assistant",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.app_url = app_url
        self.title = title
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        model: Optional[str] = None,
        title: str = "AlagApp Health Assistant",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "OpenRouterClient":
        return cls(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            model=model or settings.openrouter_model,
            timeout=settings.openrouter_timeout,
            app_url=settings.app_url,
            title=title,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, follow_redirects=True, transport=self._transport)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.app_url,
            "X-Title": self.title,
        }

    def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> str:
        """Run one chat completion and return the assistant text."""
        if not self.api_key:
            logger.error("OpenRouter API key not configured")
            raise AIProviderError("OpenRouter API key not configured")

        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        logger.info("Calling OpenRouter with model: %s", self.model)
        try:
            with self._client() as client:
                resp = client.post(f"{self.base_url}/chat/completions", headers=self._headers(), json=payload)
        except httpx.HTTPError as exc:
            logger.error("OpenRouter fetch error: %s", exc, exc_info=True)
            raise AIProviderError(str(exc) or "Failed to connect to AI service") from exc

        if resp.status_code == 429:
            raise AIProviderError(
                "Rate limit reached",
                is_rate_limit=True,
                retry_after=_retry_after_header(resp),
            )

        try:
            data: Any = resp.json()
        except ValueError:
            data = None

        error_msg = _error_message(resp, data)
        if error_msg is not None:
            logger.error("OpenRouter error: %s", error_msg)
            if "No endpoints" in error_msg or "not found" in error_msg:
                raise AIProviderError("Model not available. Please check OpenRouter for available free models.")
            code = _error_code(data)
            raise AIProviderError.from_message(error_msg, code if code is not None else resp.status_code)

        content = _first_choice_content(data)
        if not content:
            logger.error("Empty response from OpenRouter")
            raise AIProviderError("Empty response from AI")
        return content

    def key_info(self) -> Dict[str, Any]:
        """Usage/limits for the configured key (`GET /auth/key`)."""
        if not self.api_key:
            raise AIProviderError("API key not configured")
        try:
            with self._client() as client:
                resp = client.get(
                    f"{self.base_url}/auth/key",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("OpenRouter usage fetch failed: %s", exc)
            raise AIProviderError("Failed to fetch usage") from exc
        info = data.get("data") if isinstance(data, dict) else None
        return info if isinstance(info, dict) else {}


def _retry_after_header(resp: httpx.Response) -> int:
    raw = resp.headers.get("retry-after")
    try:
        return int(raw) if raw else DEFAULT_RETRY_AFTER
    except ValueError:
        return DEFAULT_RETRY_AFTER


def _error_message(resp: httpx.Response, data: Any) -> Optional[str]:
    err = data.get("error") if isinstance(data, dict) else None
    if resp.is_success and not err:
        return None
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    if isinstance(err, str) and err.strip():
        return err.strip()
    return f"HTTP {resp.status_code}"


def _error_code(data: Any) -> Optional[int]:
    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict) and isinstance(err.get("code"), int):
        return err["code"]
    return None


def _first_choice_content(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""
