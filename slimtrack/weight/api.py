# -*- coding: utf-8 -*-
"""Weight log — API endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..profile.storage import get_profile
from ..timeutil import to_utc_iso
from ..tools.calculator import calculate_bmi
from .models import WeightCreateRequest, WeightCreateResponse, WeightEntry, WeightListResponse
from .storage import add_weight_log, list_weight_logs

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/weight", tags=["Weight"])


@router.post("", response_model=WeightCreateResponse, summary="Record body weight")
def add_weight(request: WeightCreateRequest, user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    profile = get_profile(db, user["id"])
    bmi = calculate_bmi(request.weight_kg, float(profile["height_cm"])) if profile else None
    logged_at = to_utc_iso(request.logged_at or datetime.now(timezone.utc))
    try:
        log_id = add_weight_log(db, user["id"], weight_kg=request.weight_kg, bmi=bmi, logged_at=logged_at)
    except Exception as exc:
        log.warning("weight log insert failed", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save weight: {exc}") from exc
    return WeightCreateResponse(id=log_id, success=True, bmi=bmi)


@router.get("", response_model=WeightListResponse, summary="Recent weight entries, newest first")
def list_weight(
    limit: int = Query(default=30, ge=1, le=365),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
):
    rows = list_weight_logs(db, user["id"], limit=limit)
    entries = [WeightEntry.model_validate(r) for r in rows]
    return WeightListResponse(count=len(entries), entries=entries)
