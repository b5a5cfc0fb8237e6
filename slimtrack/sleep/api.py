# -*- coding: utf-8 -*-
"""Sleep log — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..timeutil import as_utc, to_utc_iso
from .models import SleepCreateRequest, SleepCreateResponse, SleepEntry, SleepListResponse
from .storage import add_sleep_log, list_sleep_logs, sleep_duration_hours

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sleep", tags=["Sleep"])


@router.post("", response_model=SleepCreateResponse, summary="Record a night of sleep")
def add_sleep(request: SleepCreateRequest, user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    bed_time = as_utc(request.bed_time)
    wake_time = as_utc(request.wake_time)
    if wake_time <= bed_time:
        raise HTTPException(status_code=400, detail="wake_time must be later than bed_time")

    duration = sleep_duration_hours(bed_time, wake_time)
    wake_iso = to_utc_iso(wake_time)
    try:
        log_id = add_sleep_log(
            db,
            user["id"],
            bed_time=to_utc_iso(bed_time),
            wake_time=wake_iso,
            duration_hours=duration,
            quality=request.quality,
            notes=request.notes,
            logged_at=wake_iso,
        )
    except Exception as exc:
        log.warning("sleep log insert failed", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save sleep: {exc}") from exc
    return SleepCreateResponse(id=log_id, success=True, duration_hours=duration)


@router.get("", response_model=SleepListResponse, summary="List sleep entries")
def list_sleep(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
):
    entries = [SleepEntry.model_validate(r) for r in list_sleep_logs(db, user["id"], start=start, end=end)]
    average = round(sum(e.duration_hours for e in entries) / len(entries), 1) if entries else None
    return SleepListResponse(count=len(entries), average_hours=average, entries=entries)
