# -*- coding: utf-8 -*-
"""Account: API endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..auth.api import clear_auth_cookie
from ..auth.security import get_current_user, verify_password
from ..config import Settings, get_settings
from .deletion import DELETION_STEPS, delete_account
from .models import AccountDeleteRequest, DeletionStepsResponse
from .storage import SqliteAccountStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/account", tags=["Account"])


def get_account_store(settings: Settings = Depends(get_settings)) -> SqliteAccountStore:
    return SqliteAccountStore(settings.app_db_path)


@router.get("", response_model=DeletionStepsResponse, summary="Deletion steps for progress display")
def deletion_steps():
    return DeletionStepsResponse(steps=[s.label for s in DELETION_STEPS])


@router.post("", summary="Permanently delete the current account")
def delete_current_account(
    request: Optional[AccountDeleteRequest] = None,
    user: dict = Depends(get_current_user),
    store: SqliteAccountStore = Depends(get_account_store),
):
    if request is None or not request.password:
        raise HTTPException(status_code=400, detail="Password is required")

    # Re-authenticate before an irreversible operation.
    if not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid password")

    try:
        report = delete_account(store, user["id"])
    except Exception as exc:
        logger.error("Account deletion error: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="An unexpected error occurred") from exc

    if not report.success:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to delete account. Please contact support.",
                "deletionResults": report.results_payload(),
            },
        )

    response = JSONResponse(
        content={
            "success": True,
            "message": "Account deleted successfully",
            "deletionResults": report.results_payload(),
        }
    )
    clear_auth_cookie(response)
    return response
