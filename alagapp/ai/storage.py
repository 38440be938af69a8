# -*- coding: utf-8 -*-
"""AI: conversation storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def create_conversation(db_path: Path, *, user_id: str, title: str) -> Dict[str, Any]:
    conversation_id = str(uuid4())
    now = _utc_now()
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO ai_conversations (id, user_id, title, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (conversation_id, user_id, title[:64], now, now),
        )
    return {"id": conversation_id, "user_id": user_id, "title": title[:64], "created_at": now, "updated_at": now}


def get_conversation(db_path: Path, *, user_id: str, conversation_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        row = conn.execute(
            "SELECT * FROM ai_conversations WHERE id = ? AND user_id = ?",
            (conversation_id, user_id),
        ).fetchone()
        return dict(row) if row else None


def append_message(db_path: Path, *, user_id: str, conversation_id: str, role: str, content: str) -> Dict[str, Any]:
    message_id = str(uuid4())
    now = _utc_now()
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO ai_messages (id, user_id, conversation_id, role, content, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (message_id, user_id, conversation_id, role, content, now),
        )
        conn.execute(
            "UPDATE ai_conversations SET updated_at = ? WHERE id = ?",
            (now, conversation_id),
        )
    return {"id": message_id, "role": role, "content": content, "created_at": now}


def list_messages(db_path: Path, *, conversation_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        rows = conn.execute(
            """
            SELECT id, role, content, created_at FROM ai_messages
            WHERE conversation_id = ?
            ORDER BY created_at ASC, rowid ASC
            """,
            (conversation_id,),
        ).fetchall()
    messages = [dict(r) for r in rows]
    if limit is not None:
        messages = messages[-limit:]
    return messages
