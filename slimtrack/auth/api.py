# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import sqlite3

from fastapi import APIRouter, Depends, HTTPException, Response

from ..app_db import AppDatabase, get_db
from ..config import Settings, get_settings
from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import TOKEN_COOKIE_NAME, create_access_token, get_current_user, hash_password, verify_password
from .storage import create_user, get_user_by_email

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(id=row["id"], email=row["email"], created_at=row["created_at"])


def _set_auth_cookie(resp: Response, token: str, app_settings: Settings) -> None:
    resp.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(app_settings.cookie_secure),
        samesite="lax",
        max_age=int(app_settings.token_ttl_days) * 24 * 60 * 60,
        path="/",
    )


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(
    request: RegisterRequest,
    response: Response,
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    if get_user_by_email(db, request.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    try:
        user = create_user(db, email=request.email, password_hash=hash_password(request.password))
    except sqlite3.IntegrityError as exc:
        raise HTTPException(status_code=400, detail="Email already registered") from exc

    token = create_access_token(app_settings, user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token, app_settings)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(
    request: LoginRequest,
    response: Response,
    db: AppDatabase = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    user = get_user_by_email(db, request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(app_settings, user_id=user["id"], email=user["email"])
    _set_auth_cookie(response, token, app_settings)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/logout", summary="Logout")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"success": True}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return _user_public(user)
