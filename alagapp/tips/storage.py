# -*- coding: utf-8 -*-
"""Tips: saved tips storage."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from ..app_db import db_conn
from .models import SavedTip, SaveTipRequest


def save_tip(db_path: Path, user_id: str, request: SaveTipRequest) -> SavedTip:
    tip = SavedTip(
        id=str(uuid4()),
        user_id=user_id,
        category=request.category,
        content=request.content,
        emoji=request.emoji,
        created_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO saved_tips (id, user_id, category, content, emoji, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (tip.id, tip.user_id, tip.category.value, tip.content, tip.emoji, tip.created_at),
        )
    return tip


def delete_tip(db_path: Path, user_id: str, tip_id: str) -> bool:
    with db_conn(db_path) as conn:
        cur = conn.execute("DELETE FROM saved_tips WHERE id = ? AND user_id = ?", (tip_id, user_id))
    return cur.rowcount > 0
