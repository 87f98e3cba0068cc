"""
Caller identity resolution.

Authentication failures never escape this module: a missing, malformed,
wrongly signed or expired `token` cookie resolves to `ANONYMOUS`. Callers
decide what an anonymous caller may do.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Union

from fastapi import Request

from .security import ACCESS_TOKEN_COOKIE, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Anonymous:
    pass


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    role: str | None = None
    claims: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


Identity = Union[Anonymous, AuthenticatedUser]

ANONYMOUS = Anonymous()


def identity_from_token(token: str | None, tokens: TokenService) -> Identity:
    if not token:
        return ANONYMOUS
    try:
        claims = tokens.verify(token)
        role = claims.get("role")
        return AuthenticatedUser(
            id=str(claims["id"]),
            role=str(role) if role is not None else None,
            claims=claims,
        )
    except Exception as exc:  # noqa: BLE001
        logger.debug("caller resolved as anonymous: %s", type(exc).__name__)
        return ANONYMOUS


def resolve_caller(request: Request, tokens: TokenService) -> Identity:
    return identity_from_token(request.cookies.get(ACCESS_TOKEN_COOKIE), tokens)


def require_session(tokens: TokenService) -> Callable[[Request], Awaitable[bool]]:
    """
    Request-gate policy admitting only callers with a verifiable session cookie.
    """

    async def policy(request: Request) -> bool:
        return isinstance(resolve_caller(request, tokens), AuthenticatedUser)

    return policy
