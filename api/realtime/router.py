"""
Realtime API endpoints: private-channel auth and browser client config.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request

from auth.dependencies import get_current_user
from auth.identity import AuthenticatedUser
from core.errors import BadRequest, Forbidden, ServiceUnavailable

from .notifier import RealtimeNotifier, get_notifier, user_channel

logger = logging.getLogger(__name__)

AUTH_ENDPOINT = "/api/pusher/auth"

router = APIRouter()


@router.post(AUTH_ENDPOINT)
async def pusher_auth(
    request: Request,
    current_user: AuthenticatedUser = Depends(get_current_user),
    notifier: RealtimeNotifier = Depends(get_notifier),
) -> dict:
    """
    Sign a subscription to the caller's own `private-user-<id>` channel.

    The Pusher JS client posts `socket_id` and `channel_name` form-encoded.
    """
    if not notifier.enabled:
        raise ServiceUnavailable("Real-time not configured")

    body = (await request.body()).decode("utf-8", errors="replace")
    params = dict(parse_qsl(body))
    socket_id = (params.get("socket_id") or "").strip()
    channel_name = (params.get("channel_name") or "").strip()
    if not socket_id or not channel_name:
        raise BadRequest("Missing parameters")

    if channel_name != user_channel(current_user.id):
        logger.info("Rejected channel auth user_id=%s channel=%s", current_user.id, channel_name)
        raise Forbidden("Forbidden")

    try:
        return notifier.authorize_channel(channel_name, socket_id)
    except ValueError as exc:
        # The SDK validates socket_id/channel formats.
        raise BadRequest("Invalid parameters") from exc


@router.get("/api/realtime/config")
async def realtime_config(notifier: RealtimeNotifier = Depends(get_notifier)) -> dict:
    """
    Public settings for browser clients; `enabled: false` means skip subscribing.
    """
    return {
        "enabled": notifier.enabled,
        "key": notifier.key if notifier.enabled else None,
        "cluster": notifier.cluster if notifier.enabled else None,
        "authEndpoint": AUTH_ENDPOINT,
    }
