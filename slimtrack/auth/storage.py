# -*- coding: utf-8 -*-
"""Auth — user rows."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import AppDatabase
from ..timeutil import utc_now_iso


def get_user_by_email(db: AppDatabase, email: str) -> Optional[Dict[str, Any]]:
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(db: AppDatabase, user_id: str) -> Optional[Dict[str, Any]]:
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(db: AppDatabase, *, email: str, password_hash: str) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = utc_now_iso()
    email_norm = email.lower().strip()
    with db.connect() as conn:
        conn.execute(
            "INSERT INTO users (id, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
            (user_id, email_norm, password_hash, now),
        )
    return {"id": user_id, "email": email_norm, "password_hash": password_hash, "created_at": now}
