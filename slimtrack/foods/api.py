# -*- coding: utf-8 -*-
"""Food catalog — public API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import AppDatabase, get_db
from .models import Food, FoodSearchResponse
from .storage import get_food, search_foods

router = APIRouter(prefix="/api/foods", tags=["Foods"])


@router.get("/search", response_model=FoodSearchResponse, summary="Search foods by name")
def search(query: str = Query(default="", max_length=100), db: AppDatabase = Depends(get_db)):
    foods = [Food.model_validate(r) for r in search_foods(db, query)]
    return FoodSearchResponse(query=query, count=len(foods), foods=foods)


@router.get("/{food_id}", response_model=Food, summary="Get a food by id")
def get_by_id(food_id: int, db: AppDatabase = Depends(get_db)):
    row = get_food(db, food_id)
    if not row:
        raise HTTPException(status_code=404, detail="Food not found")
    return Food.model_validate(row)
