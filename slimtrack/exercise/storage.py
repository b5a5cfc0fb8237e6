# -*- coding: utf-8 -*-
"""Exercise log — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..timeutil import range_bounds, utc_now_iso


def add_exercise_log(
    db: AppDatabase,
    user_id: str,
    *,
    exercise_type: str,
    duration_min: float,
    calories_burned: int,
    distance_km: Optional[float],
    notes: Optional[str],
    logged_at: str,
) -> int:
    with db.connect() as conn:
        cur = conn.execute(
            """
            INSERT INTO exercise_logs (
                user_id, exercise_type, duration_min, calories_burned, distance_km, notes, logged_at, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (user_id, exercise_type, float(duration_min), int(calories_burned), distance_km, notes, logged_at, utc_now_iso()),
        )
        return int(cur.lastrowid)


def list_exercise_logs(db: AppDatabase, user_id: str, *, start: Optional[str] = None, end: Optional[str] = None) -> List[Dict[str, Any]]:
    start_date, end_date = range_bounds(start, end)
    with db.connect() as conn:
        rows = conn.execute(
            """
            SELECT * FROM exercise_logs
            WHERE user_id = ? AND substr(logged_at, 1, 10) BETWEEN ? AND ?
            ORDER BY logged_at DESC, id DESC
            """,
            (user_id, start_date, end_date),
        ).fetchall()
        return [dict(r) for r in rows]


def delete_exercise_log(db: AppDatabase, user_id: str, log_id: int) -> bool:
    with db.connect() as conn:
        cur = conn.execute("DELETE FROM exercise_logs WHERE id = ? AND user_id = ?", (int(log_id), user_id))
        return cur.rowcount > 0


def count_exercise_logs(db: AppDatabase, user_id: str) -> int:
    with db.connect() as conn:
        row = conn.execute("SELECT COUNT(*) AS n FROM exercise_logs WHERE user_id = ?", (user_id,)).fetchone()
        return int(row["n"])
