# -*- coding: utf-8 -*-
"""Check-ins — API endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..config import Settings, get_settings
from ..exercise.storage import count_exercise_logs
from ..profile.storage import get_profile
from ..timeutil import local_today
from ..weight.storage import latest_weight
from .models import AchievementsResponse, CheckInCreateRequest, CheckInCreateResponse, CheckInStats
from .storage import add_check_in, consecutive_days, count_by_type, derive_achievements, list_check_in_days

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkins", tags=["CheckIns"])

def _tz_offset_query():
    return Query(default=None, ge=-720, le=840, description="Client offset from UTC in minutes; defaults to the server setting")


def _today(app_settings: Settings, tz_offset_minutes: Optional[int]) -> date:
    offset = app_settings.tz_offset_minutes if tz_offset_minutes is None else tz_offset_minutes
    return local_today(offset)


@router.post("", response_model=CheckInCreateResponse, summary="Daily check-in (idempotent per day and type)")
def check_in(
    request: CheckInCreateRequest,
    tz_offset_minutes: Optional[int] = _tz_offset_query(),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    day = (request.date or _today(app_settings, tz_offset_minutes)).isoformat()
    try:
        created = add_check_in(db, user["id"], day=day, check_type=request.type.value, notes=request.notes)
    except Exception as exc:
        log.warning("check-in insert failed", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save check-in: {exc}") from exc
    return CheckInCreateResponse(success=True, created=created, date=day, type=request.type)


@router.get("/stats", response_model=CheckInStats, summary="Streak and totals")
def stats(
    today: date | None = Query(default=None, description="YYYY-MM-DD; defaults to the client's local today"),
    tz_offset_minutes: Optional[int] = _tz_offset_query(),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    days = list_check_in_days(db, user["id"])
    return CheckInStats(
        consecutive_days=consecutive_days(days, today or _today(app_settings, tz_offset_minutes)),
        total_days=len(days),
        by_type=count_by_type(db, user["id"]),
        last_check_in=days[0] if days else None,
    )


@router.get("/achievements", response_model=AchievementsResponse, summary="Achievement progress and weight goal progress")
def achievements(
    today: date | None = Query(default=None, description="YYYY-MM-DD; defaults to the client's local today"),
    tz_offset_minutes: Optional[int] = _tz_offset_query(),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    streak = consecutive_days(list_check_in_days(db, user["id"]), today or _today(app_settings, tz_offset_minutes))

    weight_lost: Optional[float] = None
    goal_loss: Optional[float] = None
    goal_progress: Optional[float] = None
    profile = get_profile(db, user["id"])
    current = latest_weight(db, user["id"])
    if profile:
        initial = float(profile["initial_weight_kg"])
        weight_lost = round(initial - current, 1) if current is not None else 0.0
        goal_loss = round(initial - float(profile["target_weight_kg"]), 1)
        if goal_loss > 0:
            goal_progress = round(min(1.0, max(0.0, weight_lost / goal_loss)), 3)

    items = derive_achievements(streak=streak, weight_lost_kg=weight_lost, exercise_count=count_exercise_logs(db, user["id"]))
    return AchievementsResponse(
        achievements=items,
        unlocked_count=sum(1 for a in items if a.unlocked),
        weight_lost_kg=weight_lost,
        goal_loss_kg=goal_loss,
        goal_progress=goal_progress,
    )
