# -*- coding: utf-8 -*-
"""Exercise log — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ExerciseCreateRequest(BaseModel):
    exercise_type: str = Field(..., min_length=1, max_length=100, description="运动类型，如 跑步 / running")
    duration_min: float = Field(..., gt=0, le=24 * 60, description="时长 (分钟)")
    distance_km: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=2000)
    logged_at: Optional[datetime] = Field(None, description="ISO8601; defaults to now")


class ExerciseCreateResponse(BaseModel):
    id: int
    success: bool
    calories_burned: int


class ExerciseEntry(BaseModel):
    id: int
    exercise_type: str
    duration_min: float
    calories_burned: int = Field(0, ge=0)
    distance_km: Optional[float] = None
    notes: Optional[str] = None
    logged_at: str
    created_at: str


class ExerciseListResponse(BaseModel):
    count: int
    total_calories_burned: int = Field(0, ge=0)
    entries: List[ExerciseEntry]
