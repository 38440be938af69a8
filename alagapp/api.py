# -*- coding: utf-8 -*-
"""
AlagApp health-tracking API.

Accounts, daily check-ins, medications, vitals, wellness tips and
AI-assisted nutrition estimates.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .account.api import router as account_router
from .ai.api import nutrition_router
from .ai.api import router as ai_router
from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .checkins.api import router as checkins_router
from .config import Settings
from .medications.api import router as medications_router
from .tips.api import router as tips_router
from .vitals.api import router as vitals_router

logger = logging.getLogger(__name__)

_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    msg = str(errors[0].get("msg") or "Invalid request")
    # Messages raised from our own validators carry pydantic's prefix.
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="AlagApp API",
        description="Personal health tracking: check-ins, medications, vitals, tips and AI nutrition estimates",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    init_app_db(settings.app_db_path)

    @app.middleware("http")
    async def _auth_gate(request: Request, call_next):
        path = request.url.path
        if (
            path.startswith("/api")
            and path != "/api/health"
            and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES)
        ):
            try:
                request.state.user = get_current_user_from_request(request)
            except HTTPException as exc:
                return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})
        return await call_next(request)

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    app.include_router(auth_router)
    app.include_router(account_router)
    app.include_router(ai_router)
    app.include_router(nutrition_router)
    app.include_router(checkins_router)
    app.include_router(medications_router)
    app.include_router(vitals_router)
    app.include_router(tips_router)

    @app.get("/api/health", tags=["Health"])
    def health():
        return {"ok": True}

    return app
