"""
Auth security helpers: session tokens and password hashing.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import bcrypt
import jwt
from fastapi import Request

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "token"
REFRESH_TOKEN_COOKIE = "refreshToken"


class AuthSecurityError(RuntimeError):
    pass


class InvalidToken(AuthSecurityError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


@dataclass(frozen=True)
class TokenService:
    """
    Issues and verifies HS256 session tokens.

    Access and refresh tokens are signed with separate secrets; both carry the
    user id in the `id` claim.
    """

    secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_ttl_seconds: int = 15 * 60
    refresh_ttl_seconds: int = 7 * 24 * 60 * 60

    def __post_init__(self) -> None:
        if not (self.secret or "").strip():
            raise AuthSecurityError("Token signing secret is empty.")
        if not (self.refresh_secret or "").strip():
            raise AuthSecurityError("Refresh token signing secret is empty.")

    def issue(self, claims: Mapping[str, Any]) -> str:
        return self._encode(claims, self.secret, self.access_ttl_seconds)

    def verify(self, token: str) -> dict[str, Any]:
        return self._decode(token, self.secret)

    def issue_refresh(self, claims: Mapping[str, Any]) -> str:
        return self._encode(claims, self.refresh_secret, self.refresh_ttl_seconds)

    def verify_refresh(self, token: str) -> dict[str, Any]:
        return self._decode(token, self.refresh_secret)

    def _encode(self, claims: Mapping[str, Any], secret: str, ttl_seconds: int) -> str:
        if not str(claims.get("id") or "").strip():
            raise AuthSecurityError("Token claims must include a user id.")
        issued_at = now_epoch_s()
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + ttl_seconds
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, secret: str) -> dict[str, Any]:
        raw = (token or "").strip()
        if not raw:
            raise InvalidToken("Token is empty.")

        try:
            payload = jwt.decode(raw, secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            logger.debug("token verification failed: %s", type(exc).__name__)
            raise InvalidToken("Invalid or expired token.") from exc

        if not isinstance(payload, dict) or not str(payload.get("id") or "").strip():
            raise InvalidToken("Token has no user id.")
        return payload


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens
