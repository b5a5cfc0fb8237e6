# -*- coding: utf-8 -*-
"""User profile — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..tools.calculator import ActivityLevel, BMICategory, Gender


class ProfileCreateRequest(BaseModel):
    gender: Gender
    age: int = Field(..., gt=0, le=120, description="年龄")
    height_cm: float = Field(..., gt=0, le=272, description="身高 (cm)")
    initial_weight_kg: float = Field(..., gt=0, le=500, description="初始体重 (kg)")
    target_weight_kg: float = Field(..., gt=0, le=500, description="目标体重 (kg)")
    activity_level: ActivityLevel
    meal_settings: Optional[str] = Field(None, max_length=4000, description="餐次设置 (JSON)")


class ProfileCreateResponse(BaseModel):
    success: bool
    bmr: int
    tdee: int
    daily_calorie_target: int


class UserProfile(BaseModel):
    user_id: str
    gender: Gender
    age: int
    height_cm: float
    initial_weight_kg: float
    target_weight_kg: float
    activity_level: ActivityLevel
    bmr: int
    tdee: int
    daily_calorie_target: int
    meal_settings: Optional[str] = None
    created_at: str
    updated_at: str
    # Derived on read.
    bmi: float
    bmi_category: BMICategory
    bmi_label: str
    daily_adjustment: int = Field(..., description="daily_calorie_target - tdee")
    days_to_goal: Optional[int] = Field(None, description="null when maintaining or no adjustment")
