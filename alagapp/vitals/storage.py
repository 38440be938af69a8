# -*- coding: utf-8 -*-
"""Vitals: SQLite storage."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from .models import Vital, VitalCreateRequest


def _iso(value: Optional[datetime]) -> str:
    value = value or datetime.now(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def _row_to_vital(row: sqlite3.Row) -> Vital:
    return Vital(
        id=row["id"],
        user_id=row["user_id"],
        vital_type=row["vital_type"],
        value=json.loads(row["value_json"]),
        notes=row["notes"],
        recorded_at=row["recorded_at"],
    )


def list_vitals(db_path: Path, user_id: str, *, limit: int = 20, vital_type: Optional[str] = None) -> List[Vital]:
    sql = "SELECT * FROM vitals WHERE user_id = ?"
    params: List[Any] = [user_id]
    if vital_type:
        sql += " AND vital_type = ?"
        params.append(vital_type)
    sql += " ORDER BY recorded_at DESC LIMIT ?"
    params.append(limit)
    with db_conn(db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_vital(r) for r in rows]


def create_vital(db_path: Path, user_id: str, request: VitalCreateRequest) -> Vital:
    vital_id = str(uuid4())
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO vitals (id, user_id, vital_type, value_json, notes, recorded_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                vital_id,
                user_id,
                request.vital_type.value,
                json.dumps(request.value.model_dump()),
                request.notes,
                _iso(request.recorded_at),
            ),
        )
        row = conn.execute("SELECT * FROM vitals WHERE id = ?", (vital_id,)).fetchone()
    return _row_to_vital(row)


def delete_vital(db_path: Path, user_id: str, vital_id: str) -> bool:
    with db_conn(db_path) as conn:
        cur = conn.execute("DELETE FROM vitals WHERE id = ? AND user_id = ?", (vital_id, user_id))
    return cur.rowcount > 0
