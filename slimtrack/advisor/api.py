# -*- coding: utf-8 -*-
"""Advisor — nutritionist / trainer chat and meal-plan recommendation."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from ..config import Settings, get_settings
from ..profile.storage import get_profile
from . import llm
from .models import AdvisorChatRequest, AdvisorChatResponse, AdvisorType, MealPlanRequest, MealPlanResponse
from .prompts import MEAL_PLAN_SYSTEM, NUTRITIONIST_SYSTEM, TRAINER_SYSTEM, meal_plan_user_prompt, profile_context

router = APIRouter(prefix="/api/advisor", tags=["Advisor"])

_SYSTEM_PROMPTS = {
    AdvisorType.nutritionist: NUTRITIONIST_SYSTEM,
    AdvisorType.trainer: TRAINER_SYSTEM,
}


@router.post("/chat", response_model=AdvisorChatResponse, summary="Chat with the nutritionist or trainer")
def chat(
    request: AdvisorChatRequest,
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    profile = get_profile(db, user["id"])
    messages: List[Dict[str, Any]] = [
        {"role": "system", "content": f"{_SYSTEM_PROMPTS[request.type]}\n\n{profile_context(profile)}"},
    ]
    messages.extend(turn.model_dump() for turn in request.history)
    messages.append({"role": "user", "content": request.message})
    reply = llm.call_chat(app_settings, messages)
    return AdvisorChatResponse(success=True, reply=reply.strip())


@router.post("/meal-plan", response_model=MealPlanResponse, summary="Recommend a one-day meal plan")
def meal_plan(
    request: MealPlanRequest,
    user: dict = Depends(get_current_user),  # noqa: ARG001
    app_settings: Settings = Depends(get_settings),
):
    messages = [
        {"role": "system", "content": MEAL_PLAN_SYSTEM},
        {"role": "user", "content": meal_plan_user_prompt(request.target_calories, request.preferences)},
    ]
    recommendation = llm.call_chat(app_settings, messages)
    return MealPlanResponse(success=True, recommendation=recommendation.strip())
