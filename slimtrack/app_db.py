# -*- coding: utf-8 -*-
"""App database (users/profiles/logs) — SQLite handle with an explicit lifecycle.

The app factory constructs one AppDatabase, opens it at startup and closes it at
shutdown. Handlers receive it through the `get_db` dependency.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request

log = logging.getLogger(__name__)


_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS user_profiles (
        user_id TEXT PRIMARY KEY,
        gender TEXT NOT NULL,
        age INTEGER NOT NULL,
        height_cm REAL NOT NULL,
        initial_weight_kg REAL NOT NULL,
        target_weight_kg REAL NOT NULL,
        activity_level TEXT NOT NULL,
        bmr INTEGER NOT NULL,
        tdee INTEGER NOT NULL,
        daily_calorie_target INTEGER NOT NULL,
        meal_settings TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS foods (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        calories_per_100g REAL NOT NULL,
        protein_per_100g REAL NOT NULL DEFAULT 0,
        fat_per_100g REAL NOT NULL DEFAULT 0,
        carbs_per_100g REAL NOT NULL DEFAULT 0,
        serving_size TEXT,
        serving_grams REAL,
        created_at TEXT NOT NULL
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_foods_name ON foods(name);",
    """
    CREATE TABLE IF NOT EXISTS food_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        food_id INTEGER,
        food_name TEXT NOT NULL,
        grams REAL NOT NULL,
        calories REAL NOT NULL,
        protein_g REAL NOT NULL DEFAULT 0,
        fat_g REAL NOT NULL DEFAULT 0,
        carbs_g REAL NOT NULL DEFAULT 0,
        meal_type TEXT,
        logged_at TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_food_logs_user_logged ON food_logs(user_id, logged_at DESC);",
    """
    CREATE TABLE IF NOT EXISTS weight_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        weight_kg REAL NOT NULL,
        bmi REAL,
        logged_at TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_weight_logs_user_logged ON weight_logs(user_id, logged_at DESC);",
    """
    CREATE TABLE IF NOT EXISTS exercise_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        exercise_type TEXT NOT NULL,
        duration_min REAL NOT NULL,
        calories_burned INTEGER NOT NULL,
        distance_km REAL,
        notes TEXT,
        logged_at TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_exercise_logs_user_logged ON exercise_logs(user_id, logged_at DESC);",
    """
    CREATE TABLE IF NOT EXISTS sleep_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        bed_time TEXT NOT NULL,
        wake_time TEXT NOT NULL,
        duration_hours INTEGER NOT NULL,
        quality INTEGER,
        notes TEXT,
        logged_at TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_sleep_logs_user_logged ON sleep_logs(user_id, logged_at DESC);",
    """
    CREATE TABLE IF NOT EXISTS check_ins (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        date TEXT NOT NULL,
        type TEXT NOT NULL,
        notes TEXT,
        created_at TEXT NOT NULL,
        UNIQUE (user_id, date, type),
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
)


class AppDatabase:
    """SQLite database handle.

    `open()` creates the schema and must run before any `connect()`; `close()`
    marks the handle unusable. Each `connect()` yields a short-lived connection,
    so the handle can be shared by the threadpool running sync endpoints.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def _raw_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def open(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._raw_connection()
        try:
            cur = conn.cursor()
            for stmt in _SCHEMA:
                cur.execute(stmt)
            conn.commit()
        finally:
            conn.close()
        self._open = True
        log.info("app database opened at %s", self.db_path)

    def close(self) -> None:
        self._open = False
        log.info("app database closed")

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        if not self._open:
            raise RuntimeError("AppDatabase is not open")
        conn = self._raw_connection()
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()


def get_db(request: Request) -> AppDatabase:
    return request.app.state.db
