# -*- coding: utf-8 -*-
"""Diet — food log storage and per-day aggregation."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..timeutil import local_day_bounds, range_bounds, utc_now_iso


def add_food_log(db: AppDatabase, user_id: str, *, entry: Dict[str, Any], logged_at: str) -> int:
    with db.connect() as conn:
        cur = conn.execute(
            """
            INSERT INTO food_logs (
                user_id, food_id, food_name, grams, calories, protein_g, fat_g, carbs_g,
                meal_type, logged_at, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                entry.get("food_id"),
                entry["food_name"],
                float(entry["grams"]),
                float(entry["calories"]),
                float(entry.get("protein_g") or 0),
                float(entry.get("fat_g") or 0),
                float(entry.get("carbs_g") or 0),
                entry.get("meal_type"),
                logged_at,
                utc_now_iso(),
            ),
        )
        return int(cur.lastrowid)


def list_food_logs(db: AppDatabase, user_id: str, *, start: Optional[str] = None, end: Optional[str] = None) -> List[Dict[str, Any]]:
    start_date, end_date = range_bounds(start, end)
    with db.connect() as conn:
        rows = conn.execute(
            """
            SELECT * FROM food_logs
            WHERE user_id = ? AND substr(logged_at, 1, 10) BETWEEN ? AND ?
            ORDER BY logged_at DESC, id DESC
            """,
            (user_id, start_date, end_date),
        ).fetchall()
        return [dict(r) for r in rows]


def delete_food_log(db: AppDatabase, user_id: str, log_id: int) -> bool:
    with db.connect() as conn:
        cur = conn.execute("DELETE FROM food_logs WHERE id = ? AND user_id = ?", (int(log_id), user_id))
        return cur.rowcount > 0


def get_daily_stats(db: AppDatabase, user_id: str, day: str, *, tz_offset_minutes: int = 0) -> Dict[str, Any]:
    """Totals for one local calendar day; `tz_offset_minutes` is the client's offset from UTC."""
    lower, upper = local_day_bounds(date.fromisoformat(day[:10]), tz_offset_minutes)
    with db.connect() as conn:
        row = conn.execute(
            """
            SELECT
                COALESCE(SUM(calories), 0) AS total_calories,
                COALESCE(SUM(protein_g), 0) AS total_protein_g,
                COALESCE(SUM(fat_g), 0) AS total_fat_g,
                COALESCE(SUM(carbs_g), 0) AS total_carbs_g,
                COUNT(*) AS entry_count
            FROM food_logs
            WHERE user_id = ? AND logged_at >= ? AND logged_at < ?
            """,
            (user_id, lower, upper),
        ).fetchone()
    stats = dict(row)
    stats["date"] = day[:10]
    return stats
