# -*- coding: utf-8 -*-
"""Account: SQLite-backed deletion store."""

from __future__ import annotations

from pathlib import Path

from ..app_db import db_conn


class SqliteAccountStore:
    """Owner-scoped deletes against the app database.

    Each call runs in its own connection/transaction so a failing table never
    rolls back rows already removed from another one.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def delete_owned(self, table: str, user_id: str) -> int:
        with db_conn(self.db_path) as conn:
            cur = conn.execute(f"DELETE FROM {table} WHERE user_id = ?", (user_id,))
            return max(cur.rowcount, 0)

    def delete_identity(self, user_id: str) -> None:
        with db_conn(self.db_path) as conn:
            cur = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            if cur.rowcount != 1:
                raise LookupError(f"user {user_id} not found")
