# -*- coding: utf-8 -*-
"""Auth: DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


_USER_SELECT = """
    SELECT u.id, u.email, u.password_hash, u.created_at, p.full_name
    FROM users u LEFT JOIN profiles p ON p.user_id = u.id
"""


def get_user_by_email(db_path: Path, email: str) -> Optional[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        row = conn.execute(_USER_SELECT + " WHERE u.email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(db_path: Path, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        row = conn.execute(_USER_SELECT + " WHERE u.id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(db_path: Path, *, email: str, password_hash: str, full_name: str) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = _utc_now()
    email_norm = email.lower().strip()
    with db_conn(db_path) as conn:
        conn.execute(
            "INSERT INTO users (id, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
            (user_id, email_norm, password_hash, now),
        )
        conn.execute(
            "INSERT INTO profiles (id, user_id, full_name, created_at) VALUES (?, ?, ?, ?)",
            (str(uuid4()), user_id, full_name.strip(), now),
        )
    return {
        "id": user_id,
        "email": email_norm,
        "password_hash": password_hash,
        "full_name": full_name.strip(),
        "created_at": now,
    }
