# -*- coding: utf-8 -*-
"""
代谢计算 API 端点

将计算器中的公式暴露为无状态 REST API。
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ..config import Settings, get_settings
from .calculator import (
    BMI_CATEGORY_LABELS_ZH,
    EXERCISE_ALIASES,
    MET_VALUES,
    ActivityLevel,
    BMICategory,
    Gender,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_calorie_target,
    calculate_days_to_goal,
    calculate_exercise_calories,
    calculate_tdee,
    calculate_weight_change,
)

router = APIRouter(prefix="/api/tools", tags=["Tools"])


# ==================== 请求/响应模型 ====================

class BMRRequest(BaseModel):
    gender: Gender
    age: int = Field(..., ge=0, description="年龄")
    height_cm: float = Field(..., gt=0, description="身高 (cm)")
    weight_kg: float = Field(..., gt=0, description="体重 (kg)")


class TDEERequest(BaseModel):
    bmr: int = Field(..., description="基础代谢率 (kcal/天)")
    activity_level: ActivityLevel


class DailyTargetRequest(BaseModel):
    tdee: int
    current_weight_kg: float = Field(..., gt=0)
    target_weight_kg: float = Field(..., gt=0)


class BMIRequest(BaseModel):
    weight_kg: float = Field(..., gt=0, description="体重 (kg)")
    height_cm: float = Field(..., gt=0, description="身高 (cm)")


class BMIResponse(BaseModel):
    bmi: float
    category: BMICategory
    label: str


class ExerciseCaloriesRequest(BaseModel):
    exercise_type: str = Field(..., min_length=1, description="运动类型，如 跑步 / running")
    duration_min: float = Field(..., gt=0, description="时长 (分钟)")
    weight_kg: float = Field(..., gt=0, description="体重 (kg)")


class DaysToGoalRequest(BaseModel):
    current_weight_kg: float = Field(..., gt=0)
    target_weight_kg: float = Field(..., gt=0)
    daily_calorie_deficit: float = Field(..., description="每日热量缺口（有符号）")


class WeightChangeRequest(BaseModel):
    net_calories: float = Field(..., description="净热量（摄入 - 消耗）")


class KcalResponse(BaseModel):
    kcal: int


class ExerciseType(BaseModel):
    label: str
    met: float
    aliases: List[str] = Field(default_factory=list)


# ==================== 端点 ====================

@router.post("/bmr", response_model=KcalResponse, summary="Basal metabolic rate (Mifflin-St Jeor)")
def bmr(request: BMRRequest):
    return KcalResponse(kcal=calculate_bmr(request.gender.value, request.age, request.height_cm, request.weight_kg))


@router.post("/tdee", response_model=KcalResponse, summary="Total daily energy expenditure")
def tdee(request: TDEERequest):
    return KcalResponse(kcal=calculate_tdee(request.bmr, request.activity_level.value))


@router.post("/daily-target", response_model=KcalResponse, summary="Daily calorie target")
def daily_target(request: DailyTargetRequest, app_settings: Settings = Depends(get_settings)):
    kcal = calculate_daily_calorie_target(
        request.tdee,
        request.current_weight_kg,
        request.target_weight_kg,
        adjustment=app_settings.calorie_adjustment,
        floor=app_settings.calorie_floor,
    )
    return KcalResponse(kcal=kcal)


@router.post("/bmi", response_model=BMIResponse, summary="Body mass index and category")
def bmi(request: BMIRequest):
    value = calculate_bmi(request.weight_kg, request.height_cm)
    category = bmi_category(value)
    return BMIResponse(bmi=value, category=category, label=BMI_CATEGORY_LABELS_ZH[category])


@router.post("/exercise-calories", response_model=KcalResponse, summary="Calories burned by an exercise")
def exercise_calories(request: ExerciseCaloriesRequest):
    return KcalResponse(kcal=calculate_exercise_calories(request.exercise_type, request.duration_min, request.weight_kg))


@router.post("/days-to-goal", summary="Projected days to reach target weight")
def days_to_goal(request: DaysToGoalRequest) -> dict:
    if request.daily_calorie_deficit == 0:
        raise HTTPException(status_code=400, detail="daily_calorie_deficit must be non-zero")
    days = calculate_days_to_goal(request.current_weight_kg, request.target_weight_kg, request.daily_calorie_deficit)
    return {"days": days}


@router.post("/weight-change", summary="Weight change implied by net calories")
def weight_change(request: WeightChangeRequest) -> dict:
    return {"weight_change_kg": calculate_weight_change(request.net_calories)}


@router.get("/exercise-types", response_model=List[ExerciseType], summary="Supported exercise types and MET values")
def exercise_types():
    aliases: dict[str, list[str]] = {}
    for slug, label in EXERCISE_ALIASES.items():
        aliases.setdefault(label, []).append(slug)
    return [ExerciseType(label=label, met=met, aliases=aliases.get(label, [])) for label, met in MET_VALUES.items()]
