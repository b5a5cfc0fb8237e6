# -*- coding: utf-8 -*-
"""Lifestyle — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class LifestyleDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    intake_kcal: float = Field(0.0, ge=0)
    food_entry_count: int = Field(0, ge=0)
    exercise_kcal: float = Field(0.0, ge=0)
    exercise_count: int = Field(0, ge=0)
    net_kcal: float = Field(0.0, description="intake_kcal - exercise_kcal")
    sleep_hours: float = Field(0.0, ge=0)
    weight_kg: Optional[float] = Field(None, description="Last weight logged that day")


class LifestyleTotals(BaseModel):
    intake_kcal: float = Field(0.0, ge=0)
    food_entry_count: int = Field(0, ge=0)
    exercise_kcal: float = Field(0.0, ge=0)
    exercise_count: int = Field(0, ge=0)
    net_kcal: float = Field(0.0)
    protein_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    sleep_hours: float = Field(0.0, ge=0)


class LifestyleSummaryResponse(BaseModel):
    start: str
    end: str
    days: List[LifestyleDay]
    totals: LifestyleTotals
    tdee: Optional[int] = None
    projected_weight_change_kg: Optional[float] = Field(
        None, description="Sum of (intake - TDEE - burned) over days with intake, in kg; null without a profile"
    )
    warnings: List[str] = Field(default_factory=list)
