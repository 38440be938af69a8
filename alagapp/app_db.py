# -*- coding: utf-8 -*-
"""App database: SQLite helpers and schema."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

_USER_FK = "FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE"

_SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS profiles (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL UNIQUE,
        full_name TEXT,
        created_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS check_ins (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        check_in_date TEXT NOT NULL,
        mood INTEGER NOT NULL,
        energy INTEGER NOT NULL,
        symptoms_json TEXT NOT NULL DEFAULT '[]',
        notes TEXT,
        created_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_check_ins_user_date ON check_ins(user_id, check_in_date DESC);",
    f"""
    CREATE TABLE IF NOT EXISTS medications (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        dosage TEXT NOT NULL,
        dosage_unit TEXT NOT NULL,
        frequency TEXT NOT NULL,
        schedule_times_json TEXT NOT NULL DEFAULT '[]',
        instructions TEXT,
        start_date TEXT,
        end_date TEXT,
        is_active INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS medication_doses (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        medication_id TEXT NOT NULL,
        status TEXT NOT NULL,
        scheduled_time TEXT NOT NULL,
        taken_at TEXT,
        notes TEXT,
        created_at TEXT NOT NULL,
        {_USER_FK},
        FOREIGN KEY(medication_id) REFERENCES medications(id) ON DELETE CASCADE
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS vitals (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        vital_type TEXT NOT NULL,
        value_json TEXT NOT NULL,
        notes TEXT,
        recorded_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_vitals_user_recorded ON vitals(user_id, recorded_at DESC);",
    f"""
    CREATE TABLE IF NOT EXISTS nutrition_logs (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        meal_type TEXT NOT NULL,
        name TEXT NOT NULL,
        description TEXT,
        calories INTEGER,
        protein_g REAL,
        carbs_g REAL,
        fat_g REAL,
        fiber_g REAL,
        sugar_g REAL,
        sodium_mg INTEGER,
        logged_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS water_logs (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        amount_ml INTEGER NOT NULL,
        logged_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS exercise_logs (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        activity TEXT NOT NULL,
        duration_min INTEGER,
        calories_burned INTEGER,
        logged_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS symptom_logs (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        symptom TEXT NOT NULL,
        severity INTEGER,
        notes TEXT,
        logged_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS health_goals (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        goal_type TEXT NOT NULL,
        target_value REAL,
        created_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS saved_tips (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        category TEXT NOT NULL,
        content TEXT NOT NULL,
        emoji TEXT,
        created_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS ai_conversations (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        {_USER_FK}
    );
    """,
    f"""
    CREATE TABLE IF NOT EXISTS ai_messages (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        conversation_id TEXT NOT NULL,
        role TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL,
        {_USER_FK},
        FOREIGN KEY(conversation_id) REFERENCES ai_conversations(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_ai_messages_conversation_created ON ai_messages(conversation_id, created_at ASC);",
]


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        for statement in _SCHEMA:
            cur.execute(statement)
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
