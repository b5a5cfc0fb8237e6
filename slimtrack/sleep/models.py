# -*- coding: utf-8 -*-
"""Sleep log — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class SleepCreateRequest(BaseModel):
    bed_time: datetime = Field(..., description="入睡时间 ISO8601")
    wake_time: datetime = Field(..., description="起床时间 ISO8601")
    quality: Optional[int] = Field(None, ge=1, le=5, description="睡眠质量 1-5")
    notes: Optional[str] = Field(None, max_length=2000)


class SleepCreateResponse(BaseModel):
    id: int
    success: bool
    duration_hours: int


class SleepEntry(BaseModel):
    id: int
    bed_time: str
    wake_time: str
    duration_hours: int
    quality: Optional[int] = None
    notes: Optional[str] = None
    logged_at: str
    created_at: str


class SleepListResponse(BaseModel):
    count: int
    average_hours: Optional[float] = None
    entries: List[SleepEntry]
