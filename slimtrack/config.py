# -*- coding: utf-8 -*-
"""Service configuration read from environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from fastapi import Request


class Settings:
    """Centralized configuration for the SlimTrack service."""

    def __init__(self) -> None:
        repo_root = Path(__file__).resolve().parent.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("SLIMTRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("SLIMTRACK_DB_PATH") or (self.data_root / "slimtrack.db")
        ).expanduser()

        # Set SLIMTRACK_JWT_SECRET outside local development.
        self.jwt_secret: str = os.environ.get("SLIMTRACK_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("SLIMTRACK_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("SLIMTRACK_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}

        # Calorie policy: daily target = TDEE -/+ adjustment, never below the floor when reducing.
        self.calorie_floor: int = int(os.environ.get("SLIMTRACK_CALORIE_FLOOR") or "1200")
        self.calorie_adjustment: int = int(os.environ.get("SLIMTRACK_CALORIE_ADJUSTMENT") or "500")
        self.default_weight_kg: float = float(os.environ.get("SLIMTRACK_DEFAULT_WEIGHT_KG") or "70")
        # Minutes ahead of UTC used for "today" and day totals when a request does not say.
        self.tz_offset_minutes: int = int(os.environ.get("SLIMTRACK_TZ_OFFSET_MINUTES") or "0")

        # OpenAI-compatible LLM endpoint (advisor, meal plans, food vision).
        self.llm_base_url: str = os.environ.get(
            "LLM_BASE_URL", "https://dashscope.aliyuncs.com/compatible-mode/v1"
        )
        self.llm_api_key: str | None = os.environ.get("LLM_API_KEY")
        self.llm_model: str = os.environ.get("LLM_MODEL", "qwen-plus")
        self.llm_vision_model: str = os.environ.get("LLM_VISION_MODEL", "qwen-vl-plus")
        self.llm_timeout: float = float(os.environ.get("LLM_TIMEOUT", "30"))
        self.llm_max_tokens: int = int(os.environ.get("LLM_MAX_TOKENS", "1024"))
        self.llm_temperature: float = float(os.environ.get("LLM_TEMPERATURE", "0.7"))
        self.diet_max_image_bytes: int = int(os.environ.get("DIET_MAX_IMAGE_BYTES") or "1500000")

        self.host: str = os.environ.get("SLIMTRACK_HOST") or "127.0.0.1"
        self.port_raw: str = os.environ.get("SLIMTRACK_PORT") or "8000"
        self.log_level: str = (os.environ.get("SLIMTRACK_LOG_LEVEL") or "info").lower()

        cors = os.environ.get("SLIMTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()


def get_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", settings)
