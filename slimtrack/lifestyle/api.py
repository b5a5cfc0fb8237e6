# -*- coding: utf-8 -*-
"""Lifestyle aggregation — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..app_db import AppDatabase, get_db
from ..auth.security import get_current_user
from .models import LifestyleSummaryResponse
from .storage import get_lifestyle_summary

router = APIRouter(prefix="/api/lifestyle", tags=["Lifestyle"])


@router.get("/summary", response_model=LifestyleSummaryResponse, summary="Lifestyle daily summary")
def lifestyle_summary(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
    db: AppDatabase = Depends(get_db),
):
    data = get_lifestyle_summary(db, user["id"], start=start, end=end)
    return LifestyleSummaryResponse.model_validate(data)
