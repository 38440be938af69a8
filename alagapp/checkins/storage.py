# -*- coding: utf-8 -*-
"""Check-ins: SQLite storage."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple
from uuid import uuid4

from ..app_db import db_conn
from .models import CheckIn, CheckInRequest


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_check_in(row: sqlite3.Row) -> CheckIn:
    return CheckIn(
        id=row["id"],
        user_id=row["user_id"],
        check_in_date=row["check_in_date"],
        mood=row["mood"],
        energy=row["energy"],
        symptoms=json.loads(row["symptoms_json"] or "[]"),
        notes=row["notes"],
        created_at=row["created_at"],
    )


def list_check_ins(db_path: Path, user_id: str, *, limit: int = 7, date: Optional[str] = None) -> List[CheckIn]:
    with db_conn(db_path) as conn:
        if date:
            rows = conn.execute(
                "SELECT * FROM check_ins WHERE user_id = ? AND check_in_date = ? ORDER BY created_at DESC",
                (user_id, date),
            ).fetchall()
        else:
            rows = conn.execute(
                "SELECT * FROM check_ins WHERE user_id = ? ORDER BY check_in_date DESC LIMIT ?",
                (user_id, limit),
            ).fetchall()
    return [_row_to_check_in(r) for r in rows]


def upsert_today_check_in(db_path: Path, user_id: str, request: CheckInRequest) -> Tuple[CheckIn, bool]:
    """Store today's check-in; returns (check_in, updated)."""
    now = _utc_now()
    today = now.date().isoformat()
    symptoms_json = json.dumps(request.symptoms, ensure_ascii=False)
    with db_conn(db_path) as conn:
        existing = conn.execute(
            "SELECT id FROM check_ins WHERE user_id = ? AND check_in_date = ?",
            (user_id, today),
        ).fetchone()
        if existing:
            check_in_id = existing["id"]
            conn.execute(
                "UPDATE check_ins SET mood = ?, energy = ?, symptoms_json = ?, notes = ? WHERE id = ?",
                (request.mood, request.energy, symptoms_json, request.notes or None, check_in_id),
            )
        else:
            check_in_id = str(uuid4())
            conn.execute(
                """
                INSERT INTO check_ins (id, user_id, check_in_date, mood, energy, symptoms_json, notes, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    check_in_id,
                    user_id,
                    today,
                    request.mood,
                    request.energy,
                    symptoms_json,
                    request.notes or None,
                    now.isoformat().replace("+00:00", "Z"),
                ),
            )
        row = conn.execute("SELECT * FROM check_ins WHERE id = ?", (check_in_id,)).fetchone()
    return _row_to_check_in(row), bool(existing)
