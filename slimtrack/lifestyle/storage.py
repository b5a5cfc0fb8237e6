# -*- coding: utf-8 -*-
"""Lifestyle aggregation across diet, exercise, sleep and weight logs."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..diet.storage import list_food_logs
from ..exercise.storage import list_exercise_logs
from ..profile.storage import get_profile
from ..sleep.storage import list_sleep_logs
from ..timeutil import date_prefix, iter_days
from ..tools.calculator import calculate_weight_change
from ..weight.storage import list_weight_logs_between
from .models import LifestyleDay, LifestyleSummaryResponse, LifestyleTotals

MAX_SUMMARY_DAYS = 366


def projected_weight_change(days: List[LifestyleDay], tdee: Optional[int]) -> Optional[float]:
    """Expected change in kg from the energy balance of days that have any intake."""
    if tdee is None:
        return None
    balance = sum(d.intake_kcal - tdee - d.exercise_kcal for d in days if d.intake_kcal > 0)
    return round(calculate_weight_change(balance), 3)


def _span_days(start: str, end: str) -> int:
    try:
        return (date.fromisoformat(end[:10]) - date.fromisoformat(start[:10])).days + 1
    except ValueError:
        return 0


def _empty_summary(start: str, end: str, warning: str) -> Dict[str, Any]:
    resp = LifestyleSummaryResponse(start=start, end=end, days=[], totals=LifestyleTotals(), warnings=[warning])
    return resp.model_dump()


def get_lifestyle_summary(db: AppDatabase, user_id: str, *, start: str, end: str) -> Dict[str, Any]:
    if _span_days(start, end) > MAX_SUMMARY_DAYS:
        return _empty_summary(start, end, f"Date range longer than {MAX_SUMMARY_DAYS} days")
    days_in_range = iter_days(start, end)
    if not days_in_range:
        return _empty_summary(start, end, "Invalid date range")

    first, last = days_in_range[0], days_in_range[-1]
    per_day: Dict[str, Dict[str, float]] = defaultdict(lambda: defaultdict(float))

    for row in list_food_logs(db, user_id, start=first, end=last):
        agg = per_day[date_prefix(row["logged_at"])]
        agg["intake_kcal"] += float(row["calories"] or 0)
        agg["food_entry_count"] += 1
        agg["protein_g"] += float(row["protein_g"] or 0)
        agg["fat_g"] += float(row["fat_g"] or 0)
        agg["carbs_g"] += float(row["carbs_g"] or 0)
    for row in list_exercise_logs(db, user_id, start=first, end=last):
        agg = per_day[date_prefix(row["logged_at"])]
        agg["exercise_kcal"] += float(row["calories_burned"] or 0)
        agg["exercise_count"] += 1
    for row in list_sleep_logs(db, user_id, start=first, end=last):
        per_day[date_prefix(row["logged_at"])]["sleep_hours"] += float(row["duration_hours"] or 0)

    # Ascending order, so the last write per day wins.
    weights: Dict[str, float] = {}
    for row in list_weight_logs_between(db, user_id, start=first, end=last):
        weights[date_prefix(row["logged_at"])] = float(row["weight_kg"])

    days: List[LifestyleDay] = []
    totals = LifestyleTotals()
    for day in days_in_range:
        agg = per_day.get(day, {})
        intake = float(agg.get("intake_kcal", 0.0))
        burned = float(agg.get("exercise_kcal", 0.0))
        sleep_hours = float(agg.get("sleep_hours", 0.0))
        food_count = int(agg.get("food_entry_count", 0))
        exercise_count = int(agg.get("exercise_count", 0))
        days.append(
            LifestyleDay(
                date=day,
                intake_kcal=round(intake, 1),
                food_entry_count=food_count,
                exercise_kcal=round(burned, 1),
                exercise_count=exercise_count,
                net_kcal=round(intake - burned, 1),
                sleep_hours=round(sleep_hours, 2),
                weight_kg=weights.get(day),
            )
        )
        totals.intake_kcal += intake
        totals.food_entry_count += food_count
        totals.exercise_kcal += burned
        totals.exercise_count += exercise_count
        totals.sleep_hours += sleep_hours
        totals.protein_g += float(agg.get("protein_g", 0.0))
        totals.fat_g += float(agg.get("fat_g", 0.0))
        totals.carbs_g += float(agg.get("carbs_g", 0.0))

    totals.intake_kcal = round(totals.intake_kcal, 1)
    totals.exercise_kcal = round(totals.exercise_kcal, 1)
    totals.net_kcal = round(totals.intake_kcal - totals.exercise_kcal, 1)
    totals.sleep_hours = round(totals.sleep_hours, 2)
    totals.protein_g = round(totals.protein_g, 1)
    totals.fat_g = round(totals.fat_g, 1)
    totals.carbs_g = round(totals.carbs_g, 1)

    profile = get_profile(db, user_id)
    tdee = int(profile["tdee"]) if profile else None
    resp = LifestyleSummaryResponse(
        start=start,
        end=end,
        days=days,
        totals=totals,
        tdee=tdee,
        projected_weight_change_kg=projected_weight_change(days, tdee),
    )
    return resp.model_dump()
