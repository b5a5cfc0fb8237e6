# -*- coding: utf-8 -*-
"""Exercise log — API endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..config import Settings, get_settings
from ..profile.storage import get_profile
from ..timeutil import to_utc_iso
from ..tools.calculator import calculate_exercise_calories
from .models import ExerciseCreateRequest, ExerciseCreateResponse, ExerciseEntry, ExerciseListResponse
from .storage import add_exercise_log, delete_exercise_log, list_exercise_logs

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exercise", tags=["Exercise"])


@router.post("", response_model=ExerciseCreateResponse, summary="Record an exercise session")
def add_exercise(
    request: ExerciseCreateRequest,
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    profile = get_profile(db, user["id"])
    weight = float(profile["initial_weight_kg"]) if profile else app_settings.default_weight_kg
    calories = calculate_exercise_calories(request.exercise_type, request.duration_min, weight)
    logged_at = to_utc_iso(request.logged_at or datetime.now(timezone.utc))
    try:
        log_id = add_exercise_log(
            db,
            user["id"],
            exercise_type=request.exercise_type.strip(),
            duration_min=request.duration_min,
            calories_burned=calories,
            distance_km=request.distance_km,
            notes=request.notes,
            logged_at=logged_at,
        )
    except Exception as exc:
        log.warning("exercise log insert failed", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save exercise: {exc}") from exc
    return ExerciseCreateResponse(id=log_id, success=True, calories_burned=calories)


@router.get("", response_model=ExerciseListResponse, summary="List exercise sessions")
def list_exercise(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
):
    entries = [ExerciseEntry.model_validate(r) for r in list_exercise_logs(db, user["id"], start=start, end=end)]
    total = sum(e.calories_burned for e in entries)
    return ExerciseListResponse(count=len(entries), total_calories_burned=total, entries=entries)


@router.delete("/{log_id}", summary="Delete an exercise session")
def remove_exercise(log_id: int, user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    if not delete_exercise_log(db, user["id"], log_id):
        raise HTTPException(status_code=404, detail="Exercise entry not found")
    return {"success": True}
