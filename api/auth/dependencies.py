"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core.errors import Forbidden, Unauthorized

from .identity import AuthenticatedUser, Identity, resolve_caller
from .security import TokenService, get_token_service


async def get_identity(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    return resolve_caller(request, tokens)


async def get_current_user(identity: Identity = Depends(get_identity)) -> AuthenticatedUser:
    if not isinstance(identity, AuthenticatedUser):
        raise Unauthorized()
    return identity


async def require_admin(identity: Identity = Depends(get_identity)) -> AuthenticatedUser:
    if not isinstance(identity, AuthenticatedUser) or not identity.is_admin:
        raise Forbidden()
    return identity
