# -*- coding: utf-8 -*-
"""Weight log — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..timeutil import range_bounds, utc_now_iso


def add_weight_log(db: AppDatabase, user_id: str, *, weight_kg: float, bmi: Optional[float], logged_at: str) -> int:
    with db.connect() as conn:
        cur = conn.execute(
            "INSERT INTO weight_logs (user_id, weight_kg, bmi, logged_at, created_at) VALUES (?, ?, ?, ?, ?)",
            (user_id, float(weight_kg), bmi, logged_at, utc_now_iso()),
        )
        return int(cur.lastrowid)


def list_weight_logs(db: AppDatabase, user_id: str, *, limit: int = 30) -> List[Dict[str, Any]]:
    with db.connect() as conn:
        rows = conn.execute(
            "SELECT * FROM weight_logs WHERE user_id = ? ORDER BY logged_at DESC, id DESC LIMIT ?",
            (user_id, int(limit)),
        ).fetchall()
        return [dict(r) for r in rows]


def list_weight_logs_between(db: AppDatabase, user_id: str, *, start: Optional[str], end: Optional[str]) -> List[Dict[str, Any]]:
    start_date, end_date = range_bounds(start, end)
    with db.connect() as conn:
        rows = conn.execute(
            """
            SELECT * FROM weight_logs
            WHERE user_id = ? AND substr(logged_at, 1, 10) BETWEEN ? AND ?
            ORDER BY logged_at ASC, id ASC
            """,
            (user_id, start_date, end_date),
        ).fetchall()
        return [dict(r) for r in rows]


def latest_weight(db: AppDatabase, user_id: str) -> Optional[float]:
    with db.connect() as conn:
        row = conn.execute(
            "SELECT weight_kg FROM weight_logs WHERE user_id = ? ORDER BY logged_at DESC, id DESC LIMIT 1",
            (user_id,),
        ).fetchone()
        return float(row["weight_kg"]) if row else None
