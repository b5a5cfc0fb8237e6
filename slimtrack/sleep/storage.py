# -*- coding: utf-8 -*-
"""Sleep log — DB storage helpers."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..timeutil import range_bounds, utc_now_iso


def sleep_duration_hours(bed_time: datetime, wake_time: datetime) -> int:
    """Whole hours between bed and wake time, rounded half-up."""
    seconds = (wake_time - bed_time).total_seconds()
    return math.floor(seconds / 3600.0 + 0.5)


def add_sleep_log(
    db: AppDatabase,
    user_id: str,
    *,
    bed_time: str,
    wake_time: str,
    duration_hours: int,
    quality: Optional[int],
    notes: Optional[str],
    logged_at: str,
) -> int:
    with db.connect() as conn:
        cur = conn.execute(
            """
            INSERT INTO sleep_logs (
                user_id, bed_time, wake_time, duration_hours, quality, notes, logged_at, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (user_id, bed_time, wake_time, int(duration_hours), quality, notes, logged_at, utc_now_iso()),
        )
        return int(cur.lastrowid)


def list_sleep_logs(db: AppDatabase, user_id: str, *, start: Optional[str] = None, end: Optional[str] = None) -> List[Dict[str, Any]]:
    start_date, end_date = range_bounds(start, end)
    with db.connect() as conn:
        rows = conn.execute(
            """
            SELECT * FROM sleep_logs
            WHERE user_id = ? AND substr(logged_at, 1, 10) BETWEEN ? AND ?
            ORDER BY logged_at DESC, id DESC
            """,
            (user_id, start_date, end_date),
        ).fetchall()
        return [dict(r) for r in rows]
