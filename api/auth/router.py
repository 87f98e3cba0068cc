"""
Auth API endpoints (cookie sessions).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from core.db import Database, get_db

from . import schemas, service
from .dependencies import get_current_user
from .identity import AuthenticatedUser
from .security import REFRESH_TOKEN_COOKIE, TokenService, get_token_service

router = APIRouter(prefix="/api/auth")


def _secure_cookies(request: Request) -> bool:
    return bool(request.app.state.settings.is_production)


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    payload: schemas.LoginRequest,
    request: Request,
    response: Response,
    db: Database = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> schemas.LoginResponse:
    body, issued = await service.login(db, tokens, payload)
    service.set_session_cookies(response, issued, tokens, secure=_secure_cookies(request))
    return body


@router.post("/logout", response_model=schemas.SuccessResponse)
async def logout(response: Response) -> schemas.SuccessResponse:
    service.clear_session_cookies(response)
    return schemas.SuccessResponse()


@router.post("/refresh", response_model=schemas.RefreshResponse)
async def refresh(
    request: Request,
    response: Response,
    db: Database = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> schemas.RefreshResponse:
    issued = await service.refresh(db, tokens, request.cookies.get(REFRESH_TOKEN_COOKIE))
    service.set_session_cookies(response, issued, tokens, secure=_secure_cookies(request))
    return schemas.RefreshResponse(accessToken=issued.access_token)


@router.get("/me", response_model=schemas.MeResponse)
async def me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> schemas.MeResponse:
    return await service.me(db, current_user)
