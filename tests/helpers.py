# -*- coding: utf-8 -*-
"""Shared fixtures: a temp-dir app and a logged-in client."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional, Tuple

from fastapi import FastAPI
from fastapi.testclient import TestClient

from alagapp.api import create_app
from alagapp.config import Settings

PASSWORD = "Password123"


def make_app(extra_env: Optional[Dict[str, str]] = None) -> Tuple[FastAPI, Path]:
    tmp = Path(tempfile.mkdtemp(prefix="alagapp-test-"))
    env = {
        "ALAGAPP_DATA_ROOT": str(tmp / "data"),
        "ALAGAPP_DB_PATH": str(tmp / "data" / "alagapp.db"),
        "ALAGAPP_JWT_SECRET": "test-secret",
    }
    env.update(extra_env or {})
    return create_app(Settings(env)), tmp


def cleanup(tmp: Path) -> None:
    shutil.rmtree(tmp, ignore_errors=True)


def register(client: TestClient, email: str = "demo@example.com", password: str = PASSWORD) -> Dict:
    resp = client.post(
        "/api/auth/register",
        json={"fullName": "Demo User", "email": email, "password": password},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()
