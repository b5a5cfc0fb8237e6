# -*- coding: utf-8 -*-
"""Check-ins — DB storage helpers and streak arithmetic."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from ..app_db import AppDatabase
from ..timeutil import utc_now_iso
from .models import Achievement, AchievementType

# (key, type, title, description, target)
ACHIEVEMENT_RULES = (
    ("streak_7", AchievementType.consecutive_checkin, "连续打卡7天", "坚持就是胜利！", 7),
    ("weight_loss_5kg", AchievementType.weight_goal, "减重达人", "成功减重5kg", 5),
    ("exercise_100", AchievementType.exercise_milestone, "运动健将", "累计运动100次", 100),
    ("streak_30", AchievementType.consecutive_checkin, "月度冠军", "连续打卡30天", 30),
)


def consecutive_days(days: Iterable[str], today: date) -> int:
    """Length of the run of check-in days ending today, or yesterday if today is still open."""
    seen = set()
    for d in days:
        try:
            seen.add(date.fromisoformat(str(d)[:10]))
        except ValueError:
            continue
    if today in seen:
        cur = today
    elif today - timedelta(days=1) in seen:
        cur = today - timedelta(days=1)
    else:
        return 0
    streak = 0
    while cur in seen:
        streak += 1
        cur -= timedelta(days=1)
    return streak


def derive_achievements(*, streak: int, weight_lost_kg: Optional[float], exercise_count: int) -> List[Achievement]:
    """Achievement progress computed from the current streak, weight lost and exercise total."""
    current_by_type = {
        AchievementType.consecutive_checkin: float(streak),
        AchievementType.weight_goal: max(0.0, weight_lost_kg or 0.0),
        AchievementType.exercise_milestone: float(exercise_count),
    }
    out: List[Achievement] = []
    for key, kind, title, description, target in ACHIEVEMENT_RULES:
        current = round(current_by_type[kind], 1)
        out.append(
            Achievement(
                key=key,
                type=kind,
                title=title,
                description=description,
                target=target,
                current=current,
                progress=round(min(1.0, current / target), 3),
                unlocked=current >= target,
            )
        )
    return out


def add_check_in(db: AppDatabase, user_id: str, *, day: str, check_type: str, notes: Optional[str]) -> bool:
    """Insert a check-in; returns False when (user, day, type) already exists."""
    with db.connect() as conn:
        cur = conn.execute(
            """
            INSERT INTO check_ins (user_id, date, type, notes, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(user_id, date, type) DO NOTHING
            """,
            (user_id, day, check_type, notes, utc_now_iso()),
        )
        return cur.rowcount > 0


def list_check_in_days(db: AppDatabase, user_id: str) -> List[str]:
    with db.connect() as conn:
        rows = conn.execute(
            "SELECT DISTINCT date FROM check_ins WHERE user_id = ? ORDER BY date DESC",
            (user_id,),
        ).fetchall()
        return [r["date"] for r in rows]


def count_by_type(db: AppDatabase, user_id: str) -> Dict[str, int]:
    with db.connect() as conn:
        rows = conn.execute(
            "SELECT type, COUNT(*) AS n FROM check_ins WHERE user_id = ? GROUP BY type",
            (user_id,),
        ).fetchall()
        return {r["type"]: int(r["n"]) for r in rows}
