# -*- coding: utf-8 -*-
"""Food catalog — DB storage helpers and the built-in seed list."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..app_db import AppDatabase
from ..timeutil import utc_now_iso

log = logging.getLogger(__name__)

SEARCH_LIMIT = 20

# name, kcal, protein, fat, carbs (per 100 g), serving size, serving grams
COMMON_FOODS = (
    # 主食
    ("米饭", 116, 3, 0, 26, "一碗", 150),
    ("白米饭", 116, 3, 0, 26, "一碗", 150),
    ("面条", 137, 5, 1, 28, "一碗", 200),
    ("馒头", 221, 7, 1, 47, "一个", 100),
    ("面包", 265, 9, 3, 50, "一片", 40),
    ("包子", 227, 7, 3, 44, "一个", 80),
    # 肉类
    ("鸡胸肉", 165, 31, 4, 0, "一块", 150),
    ("猪肉", 242, 17, 19, 0, "一份", 100),
    ("牛肉", 250, 26, 15, 0, "一份", 100),
    ("羊肉", 203, 19, 14, 0, "一份", 100),
    ("鱼肉", 206, 22, 13, 0, "一条", 200),
    # 蛋类
    ("鸡蛋", 147, 13, 10, 1, "一个", 50),
    ("煮鸡蛋", 155, 13, 11, 1, "一个", 50),
    # 蔬菜
    ("西兰花", 34, 3, 0, 7, "一份", 100),
    ("番茄", 18, 1, 0, 4, "一个", 150),
    ("黄瓜", 15, 1, 0, 3, "一根", 100),
    ("白菜", 13, 1, 0, 2, "一份", 100),
    ("菠菜", 23, 3, 0, 4, "一份", 100),
    ("胡萝卜", 41, 1, 0, 10, "一根", 100),
    # 水果
    ("苹果", 52, 0, 0, 14, "一个", 150),
    ("香蕉", 89, 1, 0, 23, "一根", 120),
    ("橙子", 47, 1, 0, 12, "一个", 130),
    ("西瓜", 30, 1, 0, 8, "一块", 200),
    ("葡萄", 69, 1, 0, 18, "一串", 100),
    # 奶制品
    ("牛奶", 61, 3, 3, 5, "一杯", 250),
    ("酸奶", 61, 3, 3, 5, "一杯", 200),
    # 零食
    ("薯片", 536, 7, 35, 50, "一包", 50),
    ("巧克力", 546, 5, 31, 61, "一块", 40),
    ("饼干", 435, 7, 14, 71, "一包", 50),
    # 饮料
    ("可乐", 43, 0, 0, 11, "一罐", 330),
    ("橙汁", 45, 1, 0, 11, "一杯", 250),
    # 快餐
    ("汉堡", 295, 17, 14, 25, "一个", 200),
    ("披萨", 266, 11, 10, 33, "一片", 120),
    ("炸鸡", 290, 18, 18, 15, "一块", 100),
)


def seed_foods(db: AppDatabase) -> int:
    """Insert COMMON_FOODS when the catalog is empty. Returns the number inserted."""
    with db.connect() as conn:
        existing = conn.execute("SELECT COUNT(*) AS n FROM foods").fetchone()["n"]
        if existing:
            return 0
        now = utc_now_iso()
        conn.executemany(
            """
            INSERT INTO foods (
                name, calories_per_100g, protein_per_100g, fat_per_100g, carbs_per_100g,
                serving_size, serving_grams, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [(*row, now) for row in COMMON_FOODS],
        )
    log.info("seeded %d foods", len(COMMON_FOODS))
    return len(COMMON_FOODS)


def search_foods(db: AppDatabase, query: str, *, limit: int = SEARCH_LIMIT) -> List[Dict[str, Any]]:
    q = (query or "").strip()
    if not q:
        return []
    with db.connect() as conn:
        rows = conn.execute(
            "SELECT * FROM foods WHERE instr(name, ?) > 0 ORDER BY length(name), id LIMIT ?",
            (q, int(limit)),
        ).fetchall()
        return [dict(r) for r in rows]


def get_food(db: AppDatabase, food_id: int) -> Optional[Dict[str, Any]]:
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM foods WHERE id = ?", (int(food_id),)).fetchone()
        return dict(row) if row else None
