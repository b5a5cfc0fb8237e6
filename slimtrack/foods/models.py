# -*- coding: utf-8 -*-
"""Food catalog — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Food(BaseModel):
    id: int
    name: str
    calories_per_100g: float = Field(..., ge=0)
    protein_per_100g: float = Field(0.0, ge=0)
    fat_per_100g: float = Field(0.0, ge=0)
    carbs_per_100g: float = Field(0.0, ge=0)
    serving_size: Optional[str] = Field(None, description="份量描述，如 一碗")
    serving_grams: Optional[float] = Field(None, ge=0)


class FoodSearchResponse(BaseModel):
    query: str
    count: int
    foods: List[Food]
