# -*- coding: utf-8 -*-
"""User profile — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..app_db import AppDatabase
from ..timeutil import utc_now_iso


def get_profile(db: AppDatabase, user_id: str) -> Optional[Dict[str, Any]]:
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def upsert_profile(db: AppDatabase, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    now = utc_now_iso()
    with db.connect() as conn:
        conn.execute(
            """
            INSERT INTO user_profiles (
                user_id, gender, age, height_cm, initial_weight_kg, target_weight_kg,
                activity_level, bmr, tdee, daily_calorie_target, meal_settings, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                gender = excluded.gender,
                age = excluded.age,
                height_cm = excluded.height_cm,
                initial_weight_kg = excluded.initial_weight_kg,
                target_weight_kg = excluded.target_weight_kg,
                activity_level = excluded.activity_level,
                bmr = excluded.bmr,
                tdee = excluded.tdee,
                daily_calorie_target = excluded.daily_calorie_target,
                meal_settings = excluded.meal_settings,
                updated_at = excluded.updated_at
            """,
            (
                user_id,
                data["gender"],
                int(data["age"]),
                float(data["height_cm"]),
                float(data["initial_weight_kg"]),
                float(data["target_weight_kg"]),
                data["activity_level"],
                int(data["bmr"]),
                int(data["tdee"]),
                int(data["daily_calorie_target"]),
                data.get("meal_settings"),
                now,
                now,
            ),
        )
        row = conn.execute("SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)).fetchone()
    return dict(row)
