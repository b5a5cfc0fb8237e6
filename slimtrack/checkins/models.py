# -*- coding: utf-8 -*-
"""Check-ins — Pydantic models."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CheckInType(str, Enum):
    diet = "diet"
    exercise = "exercise"
    sleep = "sleep"
    weight = "weight"


class CheckInCreateRequest(BaseModel):
    type: CheckInType
    date: Optional[dt.date] = Field(None, description="YYYY-MM-DD; defaults to the client's local today")
    notes: Optional[str] = Field(None, max_length=500)


class CheckInCreateResponse(BaseModel):
    success: bool
    created: bool = Field(..., description="False when the same (date, type) was already checked in")
    date: str
    type: CheckInType


class CheckInStats(BaseModel):
    consecutive_days: int = Field(0, ge=0)
    total_days: int = Field(0, ge=0)
    by_type: Dict[str, int] = Field(default_factory=dict)
    last_check_in: Optional[str] = None


class AchievementType(str, Enum):
    consecutive_checkin = "consecutive_checkin"
    weight_goal = "weight_goal"
    exercise_milestone = "exercise_milestone"


class Achievement(BaseModel):
    key: str
    type: AchievementType
    title: str
    description: str
    target: float
    current: float = Field(0.0, ge=0)
    progress: float = Field(0.0, ge=0, le=1, description="current / target, capped at 1")
    unlocked: bool


class AchievementsResponse(BaseModel):
    achievements: List[Achievement]
    unlocked_count: int = Field(0, ge=0)
    weight_lost_kg: Optional[float] = Field(None, description="Initial profile weight minus latest logged weight")
    goal_loss_kg: Optional[float] = Field(None, description="Initial profile weight minus target weight")
    goal_progress: Optional[float] = Field(None, ge=0, le=1)
