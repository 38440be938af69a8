# -*- coding: utf-8 -*-
"""Auth: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import Settings, get_settings
from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import TOKEN_COOKIE_NAME, create_access_token, get_current_user, hash_password, verify_password
from .storage import create_user, get_user_by_email

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(
        id=row["id"],
        email=row["email"],
        full_name=row.get("full_name"),
        created_at=row["created_at"],
    )


def set_auth_cookie(resp: Response, settings: Settings, token: str) -> None:
    max_age = int(settings.token_ttl_days) * 24 * 60 * 60
    resp.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=max_age,
        path="/",
    )


def clear_auth_cookie(resp: Response) -> None:
    resp.delete_cookie(TOKEN_COOKIE_NAME, path="/")


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(request: RegisterRequest, response: Response, settings: Settings = Depends(get_settings)):
    if get_user_by_email(settings.app_db_path, request.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = create_user(
        settings.app_db_path,
        email=request.email,
        password_hash=hash_password(request.password),
        full_name=request.fullName,
    )
    token = create_access_token(settings, user_id=user["id"], email=user["email"])
    set_auth_cookie(response, settings, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, response: Response, settings: Settings = Depends(get_settings)):
    user = get_user_by_email(settings.app_db_path, request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(settings, user_id=user["id"], email=user["email"])
    set_auth_cookie(response, settings, token)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/logout", summary="Logout")
def logout(response: Response):
    clear_auth_cookie(response)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return _user_public(user)
