# -*- coding: utf-8 -*-
"""Medications: SQLite storage."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from .models import DoseCreateRequest, Medication, MedicationCreateRequest, MedicationDose

# Column name -> encoder for values coming from MedicationUpdateRequest.
_UPDATABLE: Dict[str, Any] = {
    "name": str,
    "dosage": str,
    "dosage_unit": str,
    "frequency": lambda v: getattr(v, "value", v),
    "schedule_times": lambda v: json.dumps(list(v), ensure_ascii=False),
    "instructions": lambda v: v,
    "start_date": lambda v: v,
    "end_date": lambda v: v,
    "is_active": lambda v: 1 if v else 0,
}

_COLUMN_NAMES = {"schedule_times": "schedule_times_json"}
_NULLABLE = {"instructions", "start_date", "end_date"}


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_medication(row: sqlite3.Row) -> Medication:
    return Medication(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        dosage=row["dosage"],
        dosage_unit=row["dosage_unit"],
        frequency=row["frequency"],
        schedule_times=json.loads(row["schedule_times_json"] or "[]"),
        instructions=row["instructions"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        is_active=bool(row["is_active"]),
        created_at=row["created_at"],
    )


def _row_to_dose(row: sqlite3.Row) -> MedicationDose:
    return MedicationDose(**dict(row))


def list_medications(db_path: Path, user_id: str, *, active_only: bool = False) -> List[Medication]:
    sql = "SELECT * FROM medications WHERE user_id = ?"
    if active_only:
        sql += " AND is_active = 1"
    sql += " ORDER BY created_at DESC, rowid DESC"
    with db_conn(db_path) as conn:
        rows = conn.execute(sql, (user_id,)).fetchall()
    return [_row_to_medication(r) for r in rows]


def get_medication(db_path: Path, user_id: str, medication_id: str) -> Optional[Medication]:
    with db_conn(db_path) as conn:
        row = conn.execute(
            "SELECT * FROM medications WHERE id = ? AND user_id = ?",
            (medication_id, user_id),
        ).fetchone()
    return _row_to_medication(row) if row else None


def create_medication(db_path: Path, user_id: str, request: MedicationCreateRequest) -> Medication:
    medication_id = str(uuid4())
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO medications (
                id, user_id, name, dosage, dosage_unit, frequency, schedule_times_json,
                instructions, start_date, end_date, is_active, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 1, ?)
            """,
            (
                medication_id,
                user_id,
                request.name,
                request.dosage,
                request.dosage_unit,
                request.frequency.value,
                json.dumps(request.schedule_times, ensure_ascii=False),
                request.instructions,
                request.start_date,
                request.end_date,
                _iso_now(),
            ),
        )
        row = conn.execute("SELECT * FROM medications WHERE id = ?", (medication_id,)).fetchone()
    return _row_to_medication(row)


def update_medication(db_path: Path, user_id: str, medication_id: str, updates: Dict[str, Any]) -> Optional[Medication]:
    """Apply the known columns in `updates`; returns None when the medication is not the user's."""
    assignments: List[str] = []
    params: List[Any] = []
    for key, value in updates.items():
        encode = _UPDATABLE.get(key)
        if encode is None or (value is None and key not in _NULLABLE):
            continue
        assignments.append(f"{_COLUMN_NAMES.get(key, key)} = ?")
        params.append(None if value is None else encode(value))

    with db_conn(db_path) as conn:
        if assignments:
            conn.execute(
                f"UPDATE medications SET {', '.join(assignments)} WHERE id = ? AND user_id = ?",
                (*params, medication_id, user_id),
            )
        row = conn.execute(
            "SELECT * FROM medications WHERE id = ? AND user_id = ?",
            (medication_id, user_id),
        ).fetchone()
    return _row_to_medication(row) if row else None


def delete_medication(db_path: Path, user_id: str, medication_id: str) -> bool:
    with db_conn(db_path) as conn:
        cur = conn.execute(
            "DELETE FROM medications WHERE id = ? AND user_id = ?",
            (medication_id, user_id),
        )
    return cur.rowcount > 0


def create_dose(db_path: Path, user_id: str, request: DoseCreateRequest) -> MedicationDose:
    dose_id = str(uuid4())
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO medication_doses (
                id, user_id, medication_id, status, scheduled_time, taken_at, notes, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                dose_id,
                user_id,
                request.medication_id,
                request.status,
                request.scheduled_time,
                request.taken_at,
                request.notes,
                _iso_now(),
            ),
        )
        row = conn.execute("SELECT * FROM medication_doses WHERE id = ?", (dose_id,)).fetchone()
    return _row_to_dose(row)


def list_doses(db_path: Path, user_id: str, *, date: Optional[str] = None, limit: int = 100) -> List[MedicationDose]:
    sql = "SELECT * FROM medication_doses WHERE user_id = ?"
    params: List[Any] = [user_id]
    if date:
        sql += " AND substr(scheduled_time, 1, 10) = ?"
        params.append(date)
    sql += " ORDER BY scheduled_time DESC LIMIT ?"
    params.append(limit)
    with db_conn(db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_dose(r) for r in rows]
