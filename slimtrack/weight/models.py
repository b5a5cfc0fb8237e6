# -*- coding: utf-8 -*-
"""Weight log — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class WeightCreateRequest(BaseModel):
    weight_kg: float = Field(..., gt=0, le=500)
    logged_at: Optional[datetime] = Field(None, description="ISO8601; defaults to now")


class WeightCreateResponse(BaseModel):
    id: int
    success: bool
    bmi: Optional[float] = None


class WeightEntry(BaseModel):
    id: int
    weight_kg: float
    bmi: Optional[float] = None
    logged_at: str
    created_at: str


class WeightListResponse(BaseModel):
    count: int
    entries: List[WeightEntry]
