# -*- coding: utf-8 -*-
"""Account: Pydantic models."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, field_validator


class AccountDeleteRequest(BaseModel):
    password: Optional[str] = None

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_password(cls, value: Any) -> Optional[str]:
        # Numbers are checked as typed; other non-strings count as missing.
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        return value if isinstance(value, str) else None


class DeletionStepsResponse(BaseModel):
    steps: List[str]
