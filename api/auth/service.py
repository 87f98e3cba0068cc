"""
Auth business logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Response

from core.db import Database
from core.errors import Forbidden, NotFound, Unauthorized, failure_boundary

from . import repository, schemas, security
from .identity import AuthenticatedUser
from .security import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, TokenService

ACCESS_COOKIE_PATH = "/"
REFRESH_COOKIE_PATH = "/api/auth"

_BLOCKED_STATUSES = {"suspended", "rejected"}


@dataclass(frozen=True)
class IssuedTokens:
    access_token: str
    refresh_token: str


def _to_session_user(user_row: dict) -> schemas.SessionUser:
    return schemas.SessionUser(
        id=str(user_row["id"]),
        email=str(user_row["email"]),
        role=str(user_row["role"]),
        name=str(user_row["name"]),
        status=str(user_row["status"]),
    )


def _issue_tokens(tokens: TokenService, user_row: dict, *, version: int = 1) -> IssuedTokens:
    claims = {"id": str(user_row["id"]), "role": str(user_row["role"])}
    return IssuedTokens(
        access_token=tokens.issue(claims),
        refresh_token=tokens.issue_refresh({**claims, "version": version}),
    )


def set_session_cookies(
    response: Response,
    issued: IssuedTokens,
    tokens: TokenService,
    *,
    secure: bool,
) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        issued.access_token,
        max_age=tokens.access_ttl_seconds,
        path=ACCESS_COOKIE_PATH,
        httponly=True,
        secure=secure,
        samesite="lax",
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        issued.refresh_token,
        max_age=tokens.refresh_ttl_seconds,
        path=REFRESH_COOKIE_PATH,
        httponly=True,
        secure=secure,
        samesite="lax",
    )


def clear_session_cookies(response: Response) -> None:
    response.set_cookie(ACCESS_TOKEN_COOKIE, "", max_age=0, path=ACCESS_COOKIE_PATH)
    response.set_cookie(REFRESH_TOKEN_COOKIE, "", max_age=0, path=REFRESH_COOKIE_PATH)


async def login(
    db: Database,
    tokens: TokenService,
    payload: schemas.LoginRequest,
) -> tuple[schemas.LoginResponse, IssuedTokens]:
    with failure_boundary("login"):
        user_row = await repository.get_user_by_email(db, payload.email)

    if user_row is None:
        raise NotFound(
            "No account found. Please register to continue.",
            code="ACCOUNT_NOT_FOUND",
        )

    if not security.verify_password(payload.password, str(user_row.get("password_hash") or "")):
        raise Unauthorized("Incorrect password. Please try again.", code="WRONG_PASSWORD")

    user_status = str(user_row.get("status") or "")
    if user_status == "pending":
        raise Forbidden(
            "Your account is awaiting admin approval. "
            "You'll be able to log in once approved.",
            code="PENDING_APPROVAL",
        )
    if user_status == "rejected":
        raise Forbidden(
            "Your registration was not approved. Please contact the administrator.",
            code="REJECTED",
        )
    if user_status == "suspended":
        raise Forbidden(
            "Your account has been suspended. Please contact the administrator.",
            code="SUSPENDED",
        )

    issued = _issue_tokens(tokens, user_row)
    return schemas.LoginResponse(user=_to_session_user(user_row)), issued


async def refresh(
    db: Database,
    tokens: TokenService,
    refresh_token: str | None,
) -> IssuedTokens:
    if not refresh_token:
        raise Unauthorized("Missing refresh token")

    try:
        payload = tokens.verify_refresh(refresh_token)
    except security.InvalidToken as exc:
        raise Unauthorized("Invalid or expired refresh token") from exc

    with failure_boundary("refresh"):
        user_row = await repository.get_active_user_by_id(db, str(payload["id"]))

    if user_row is None:
        raise Unauthorized("User not found")
    if str(user_row.get("status") or "") in _BLOCKED_STATUSES:
        raise Forbidden("Account suspended")

    try:
        version = int(payload.get("version") or 0) + 1
    except (TypeError, ValueError):
        version = 1
    return _issue_tokens(tokens, user_row, version=version)


async def me(db: Database, caller: AuthenticatedUser) -> schemas.MeResponse:
    with failure_boundary("me"):
        user_row = await repository.get_user_by_id(db, caller.id)

    if user_row is None:
        raise NotFound("User not found")

    user_status = str(user_row.get("status") or "")
    if user_status in _BLOCKED_STATUSES:
        raise Forbidden("Account suspended")
    if user_status == "pending":
        raise Forbidden("Account pending")

    session_user = _to_session_user(user_row)
    return schemas.MeResponse(
        user=schemas.MeUser(
            **session_user.model_dump(),
            profileImage=user_row.get("profile_image"),
        )
    )
