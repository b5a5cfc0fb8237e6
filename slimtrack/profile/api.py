# -*- coding: utf-8 -*-
"""User profile — API endpoints (onboarding + calorie targets)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..config import Settings, get_settings
from ..tools.calculator import (
    BMI_CATEGORY_LABELS_ZH,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_calorie_target,
    calculate_days_to_goal,
    calculate_tdee,
)
from ..weight.storage import latest_weight
from .models import ProfileCreateRequest, ProfileCreateResponse, UserProfile
from .storage import get_profile, upsert_profile

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["Profile"])


def _profile_view(row: Dict[str, Any], current_weight_kg: Optional[float]) -> UserProfile:
    weight = current_weight_kg if current_weight_kg is not None else float(row["initial_weight_kg"])
    bmi = calculate_bmi(weight, float(row["height_cm"]))
    category = bmi_category(bmi)
    target_weight = float(row["target_weight_kg"])
    adjustment = int(row["daily_calorie_target"]) - int(row["tdee"])
    days: Optional[int] = None
    # Only while the stored adjustment still moves the weight toward the target.
    if (weight > target_weight and adjustment < 0) or (weight < target_weight and adjustment > 0):
        days = calculate_days_to_goal(weight, target_weight, adjustment)
    return UserProfile(
        **row,
        bmi=bmi,
        bmi_category=category,
        bmi_label=BMI_CATEGORY_LABELS_ZH[category],
        daily_adjustment=adjustment,
        days_to_goal=days,
    )


@router.get("", response_model=Optional[UserProfile], summary="Get the current user's profile")
def read_profile(user: dict = Depends(get_current_user), db: AppDatabase = Depends(get_db)):
    row = get_profile(db, user["id"])
    if not row:
        return None
    return _profile_view(row, latest_weight(db, user["id"]))


@router.post("", response_model=ProfileCreateResponse, summary="Create or update the profile and compute targets")
def create_profile(
    request: ProfileCreateRequest,
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    bmr = calculate_bmr(request.gender.value, request.age, request.height_cm, request.initial_weight_kg)
    tdee = calculate_tdee(bmr, request.activity_level.value)
    target = calculate_daily_calorie_target(
        tdee,
        request.initial_weight_kg,
        request.target_weight_kg,
        adjustment=app_settings.calorie_adjustment,
        floor=app_settings.calorie_floor,
    )

    data = request.model_dump(mode="json")
    data.update({"bmr": bmr, "tdee": tdee, "daily_calorie_target": target})
    try:
        upsert_profile(db, user["id"], data)
    except Exception as exc:
        log.warning("profile upsert failed for user %s", user["id"], exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save profile: {exc}") from exc

    return ProfileCreateResponse(success=True, bmr=bmr, tdee=tdee, daily_calorie_target=target)
