# -*- coding: utf-8 -*-
"""
SlimTrack 减脂追踪 API

饮食 / 运动 / 睡眠 / 体重记录，热量目标计算，AI 营养师与健身教练。
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .advisor.api import router as advisor_router
from .app_db import AppDatabase
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .checkins.api import router as checkins_router
from .config import Settings, settings
from .diet.api import router as diet_router
from .exercise.api import router as exercise_router
from .foods.api import router as foods_router
from .foods.storage import seed_foods
from .lifestyle.api import router as lifestyle_router
from .profile.api import router as profile_router
from .sleep.api import router as sleep_router
from .tools.api import router as tools_router
from .weight.api import router as weight_router

_AUTH_EXEMPT_PREFIXES = (
    "/api/health",
    "/api/auth",
    "/api/foods",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    db = AppDatabase(app_settings.app_db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.open()
        seed_foods(db)
        try:
            yield
        finally:
            db.close()

    app = FastAPI(
        title="SlimTrack",
        description="饮食、运动、睡眠、体重记录与热量目标计算",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _auth_gate(request: Request, call_next):
        path = request.url.path
        if path.startswith("/api") and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
            try:
                request.state.user = get_current_user_from_request(request)
            except HTTPException as exc:
                return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
        return await call_next(request)

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(foods_router)
    app.include_router(diet_router)
    app.include_router(weight_router)
    app.include_router(exercise_router)
    app.include_router(sleep_router)
    app.include_router(checkins_router)
    app.include_router(lifestyle_router)
    app.include_router(advisor_router)
    app.include_router(tools_router)

    @app.get("/api/health")
    def health():
        return {"status": "ok", "database": db.is_open}

    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    try:
        port = int(settings.port_raw)
    except ValueError:
        port = 8000

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("slimtrack.api:app", host=settings.host, port=port, reload=False, log_level=settings.log_level)
