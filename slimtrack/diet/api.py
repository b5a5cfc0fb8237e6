# -*- coding: utf-8 -*-
"""Diet — API endpoints."""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..advisor import llm
from ..advisor.prompts import FOOD_ADVICE_FALLBACK, FOOD_ADVICE_SYSTEM, food_advice_user_prompt
from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..config import Settings, get_settings
from ..profile.storage import get_profile
from ..timeutil import local_today, to_utc_iso
from .models import (
    DailyStats,
    DietRecognizeRequest,
    DietRecognizeResponse,
    FoodAdviceRequest,
    FoodAdviceResponse,
    FoodLogCreateRequest,
    FoodLogCreateResponse,
    FoodLogEntry,
    FoodLogListResponse,
)
from .storage import add_food_log, delete_food_log, get_daily_stats, list_food_logs
from .vision import recognize_food

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/diet", tags=["Diet"])


def _decode_image_or_400(image_base64: str, max_bytes: int) -> bytes:
    try:
        data = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid base64 image: {exc}") from exc
    if len(data) > max_bytes:
        raise HTTPException(status_code=400, detail=f"Image too large: {len(data)} bytes > {max_bytes}")
    return data


@router.post("/logs", response_model=FoodLogCreateResponse, summary="Record a food log entry")
def add_log(request: FoodLogCreateRequest, user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    entry = request.model_dump(mode="json", exclude={"logged_at"})
    logged_at = to_utc_iso(request.logged_at or datetime.now(timezone.utc))
    try:
        log_id = add_food_log(db, user["id"], entry=entry, logged_at=logged_at)
    except Exception as exc:
        log.warning("food log insert failed", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save food log: {exc}") from exc
    return FoodLogCreateResponse(id=log_id, success=True)


@router.get("/logs", response_model=FoodLogListResponse, summary="List food log entries, newest first")
def list_logs(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
):
    entries = [FoodLogEntry.model_validate(r) for r in list_food_logs(db, user["id"], start=start, end=end)]
    return FoodLogListResponse(count=len(entries), entries=entries)


@router.delete("/logs/{log_id}", summary="Delete a food log entry")
def remove_log(log_id: int, user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    if not delete_food_log(db, user["id"], log_id):
        raise HTTPException(status_code=404, detail="Food log not found")
    return {"success": True}


@router.get("/daily-stats", response_model=DailyStats, summary="Intake totals for one local day")
def daily_stats(
    day: date = Query(..., alias="date", description="YYYY-MM-DD in the client's local calendar"),
    tz_offset_minutes: Optional[int] = Query(
        default=None, ge=-720, le=840, description="Client offset from UTC in minutes (480 for UTC+8); defaults to the server setting"
    ),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    offset = app_settings.tz_offset_minutes if tz_offset_minutes is None else tz_offset_minutes
    return DailyStats.model_validate(get_daily_stats(db, user["id"], day.isoformat(), tz_offset_minutes=offset))


@router.post("/recognize", response_model=DietRecognizeResponse, summary="Food photo recognition (no storage)")
def recognize(
    request: DietRecognizeRequest,
    user: dict = Depends(get_current_user),  # noqa: ARG001
    app_settings: Settings = Depends(get_settings),
):
    image_bytes = _decode_image_or_400(request.image_base64, max_bytes=app_settings.diet_max_image_bytes)
    items, warnings, model = recognize_food(app_settings, image_bytes=image_bytes, image_mime=request.image_mime)
    return DietRecognizeResponse(success=bool(items), items=items, warnings=warnings, model=model)


@router.post("/advice", response_model=FoodAdviceResponse, summary="Short advice on eating a food today")
def advice(
    request: FoodAdviceRequest,
    tz_offset_minutes: Optional[int] = Query(default=None, ge=-720, le=840),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    profile = get_profile(db, user["id"])
    target = int(profile["daily_calorie_target"]) if profile else app_settings.calorie_floor
    offset = app_settings.tz_offset_minutes if tz_offset_minutes is None else tz_offset_minutes
    today = local_today(offset).isoformat()
    consumed = float(get_daily_stats(db, user["id"], today, tz_offset_minutes=offset)["total_calories"])

    messages = [
        {"role": "system", "content": FOOD_ADVICE_SYSTEM},
        {"role": "user", "content": food_advice_user_prompt(request.food_name, request.calories, target, consumed)},
    ]
    try:
        text = llm.call_chat(app_settings, messages)
    except HTTPException:
        log.warning("food advice unavailable for %s", request.food_name, exc_info=True)
        return FoodAdviceResponse(success=False, advice=FOOD_ADVICE_FALLBACK)
    return FoodAdviceResponse(success=True, advice=text.strip())
