# -*- coding: utf-8 -*-
"""Configuration for the AlagApp backend.

Settings are built explicitly and handed to `create_app`; handlers reach them
through the `get_settings` dependency instead of a module-level instance.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional

from fastapi import Request


class Settings:
    """Centralized configuration, read from an environment mapping."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        repo_root = Path(__file__).resolve().parent.parent

        self.data_root: Path = Path(
            env.get("ALAGAPP_DATA_ROOT") or (repo_root / "data")
        ).expanduser()
        self.app_db_path: Path = Path(
            env.get("ALAGAPP_DB_PATH") or (self.data_root / "alagapp.db")
        ).expanduser()

        # In production you MUST set ALAGAPP_JWT_SECRET.
        self.jwt_secret: str = env.get("ALAGAPP_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(env.get("ALAGAPP_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (env.get("ALAGAPP_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.app_url: str = env.get("ALAGAPP_APP_URL") or "http://localhost:3000"

        # ---- AI providers ----
        self.openrouter_api_key: str | None = env.get("OPENROUTER_API_KEY") or None
        self.openrouter_base_url: str = (
            env.get("OPENROUTER_BASE_URL") or "https://openrouter.ai/api/v1"
        ).rstrip("/")
        self.openrouter_model: str = (
            env.get("OPENROUTER_MODEL") or "nousresearch/hermes-3-llama-3.1-405b:free"
        )
        self.openrouter_chat_model: str = (
            env.get("OPENROUTER_CHAT_MODEL") or "google/gemini-2.0-flash-001"
        )
        self.openrouter_timeout: float = float(env.get("OPENROUTER_TIMEOUT") or "30")
        self.gemini_api_key: str | None = env.get("GEMINI_API_KEY") or None
        self.gemini_model: str = env.get("GEMINI_MODEL") or "gemini-2.0-flash-lite"

        cors = env.get("ALAGAPP_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
