# -*- coding: utf-8 -*-
"""Advisor — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class AdvisorType(str, Enum):
    nutritionist = "nutritionist"
    trainer = "trainer"


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1, max_length=4000)


class AdvisorChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    type: AdvisorType = AdvisorType.nutritionist
    history: List[ChatTurn] = Field(default_factory=list, max_length=20)


class AdvisorChatResponse(BaseModel):
    success: bool
    reply: str


class MealPlanRequest(BaseModel):
    target_calories: int = Field(..., gt=0, le=10000)
    preferences: Optional[str] = Field(None, max_length=500, description="如 素食、不吃辣")


class MealPlanResponse(BaseModel):
    success: bool
    recommendation: str
