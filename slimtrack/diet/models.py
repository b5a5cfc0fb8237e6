# -*- coding: utf-8 -*-
"""Diet — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class FoodLogCreateRequest(BaseModel):
    food_id: Optional[int] = Field(None, description="foods.id when picked from the catalog")
    food_name: str = Field(..., min_length=1, max_length=200)
    grams: float = Field(..., gt=0)
    calories: float = Field(..., ge=0, description="kcal for the logged portion")
    protein_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    meal_type: Optional[MealType] = None
    logged_at: Optional[datetime] = Field(None, description="ISO8601; defaults to now")


class FoodLogCreateResponse(BaseModel):
    id: int
    success: bool


class FoodLogEntry(BaseModel):
    id: int
    food_id: Optional[int] = None
    food_name: str
    grams: float
    calories: float
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbs_g: float = 0.0
    meal_type: Optional[MealType] = None
    logged_at: str
    created_at: str


class FoodLogListResponse(BaseModel):
    count: int
    entries: List[FoodLogEntry]


class DailyStats(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    total_calories: float = Field(0.0, ge=0)
    total_protein_g: float = Field(0.0, ge=0)
    total_fat_g: float = Field(0.0, ge=0)
    total_carbs_g: float = Field(0.0, ge=0)
    entry_count: int = Field(0, ge=0)


class RecognizedFood(BaseModel):
    name: str = Field(..., min_length=1)
    confidence: float = Field(0.0, ge=0, le=1)
    estimated_grams: float = Field(0.0, ge=0)


class DietRecognizeRequest(BaseModel):
    image_base64: str = Field(..., min_length=16, description="Raw base64 without data-url prefix")
    image_mime: str = Field("image/jpeg", pattern=r"^image/(jpeg|jpg|png|webp|heic)$")


class DietRecognizeResponse(BaseModel):
    success: bool
    items: List[RecognizedFood] = []
    warnings: List[str] = []
    model: str


class FoodAdviceRequest(BaseModel):
    food_name: str = Field(..., min_length=1, max_length=200)
    calories: float = Field(..., ge=0)


class FoodAdviceResponse(BaseModel):
    success: bool
    advice: str
