"""
Pusher Channels integration (server side).

Used calls of the Pusher HTTP SDK:
- trigger(channel, event, data)          -> publish an event
- authenticate(channel=..., socket_id=...) -> sign a private-channel subscription

The notifier is built once per process from settings. When any Pusher
setting is missing the client stays `None`: `publish` becomes a no-op and
`authorize_channel` raises `RealtimeDisabled`.
"""

from __future__ import annotations

import logging
from typing import Any

import pusher
from fastapi import Request
from starlette.concurrency import run_in_threadpool

from core.config import Settings

logger = logging.getLogger(__name__)

USER_CHANNEL_PREFIX = "private-user-"
NEW_NOTIFICATION_EVENT = "new_notification"


class RealtimeDisabled(RuntimeError):
    pass


def user_channel(user_id: str) -> str:
    return f"{USER_CHANNEL_PREFIX}{user_id}"


class RealtimeNotifier:
    def __init__(self, client: Any | None = None, *, key: str | None = None, cluster: str | None = None) -> None:
        self._client = client
        self.key = key
        self.cluster = cluster

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def publish(self, channel: str, event: str, data: dict[str, Any]) -> bool:
        """
        Push one event. Returns False when disabled or when the relay call failed;
        realtime delivery is best effort and never fails the caller.
        """
        if self._client is None:
            return False
        try:
            await run_in_threadpool(self._client.trigger, channel, event, data)
        except Exception:  # noqa: BLE001
            logger.warning("Pusher trigger failed channel=%s event=%s", channel, event, exc_info=True)
            return False
        return True

    def authorize_channel(self, channel: str, socket_id: str) -> dict[str, Any]:
        if self._client is None:
            raise RealtimeDisabled("Real-time not configured")
        return self._client.authenticate(channel=channel, socket_id=socket_id)


def build_notifier(settings: Settings) -> RealtimeNotifier:
    if not settings.realtime_enabled:
        logger.warning("Pusher env vars not configured. Real-time events disabled.")
        return RealtimeNotifier()

    try:
        client = pusher.Pusher(
            app_id=settings.pusher_app_id,
            key=settings.pusher_key,
            secret=settings.pusher_secret,
            cluster=settings.pusher_cluster,
            ssl=True,
        )
    except Exception:  # noqa: BLE001
        logger.warning("Pusher initialization failed. Real-time events disabled.", exc_info=True)
        return RealtimeNotifier()

    return RealtimeNotifier(client, key=settings.pusher_key, cluster=settings.pusher_cluster)


def get_notifier(request: Request) -> RealtimeNotifier:
    return request.app.state.notifier
