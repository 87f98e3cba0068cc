"""
Notification business logic.
"""

from __future__ import annotations

import json
import logging

from core.db import Database
from core.errors import failure_boundary
from realtime.notifier import NEW_NOTIFICATION_EVENT, RealtimeNotifier, user_channel

from . import repository, schemas

LIST_LIMIT = 50

logger = logging.getLogger(__name__)


def _parse_metadata(value: object) -> object:
    # asyncpg returns jsonb as text unless a codec is registered.
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def to_notification(row: dict) -> dict:
    reference_id = row.get("reference_id")
    return {
        "id": str(row["id"]),
        "recipientId": str(row["recipient_id"]),
        "type": row.get("type"),
        "referenceId": str(reference_id) if reference_id is not None else None,
        "title": row.get("title"),
        "message": row.get("message"),
        "metadata": _parse_metadata(row.get("metadata")),
        "isRead": bool(row.get("is_read")),
        "createdAt": row.get("created_at"),
        "readAt": row.get("read_at"),
    }


async def list_notifications(db: Database, recipient_id: str) -> dict:
    with failure_boundary("Notifications list"):
        rows = await repository.list_for_recipient(db, recipient_id, limit=LIST_LIMIT)
    data = [to_notification(row) for row in rows]
    # Counted over the returned page only, like the web client expects.
    unread_count = sum(1 for item in data if not item["isRead"])
    return {"data": data, "meta": {"unreadCount": unread_count}}


async def unread_count(db: Database, recipient_id: str) -> int:
    with failure_boundary("Notifications count"):
        return await repository.count_unread(db, recipient_id)


async def mark_read(db: Database, notification_id: str, *, recipient_id: str) -> None:
    with failure_boundary("Notification read"):
        await repository.mark_read(db, notification_id, recipient_id=recipient_id)


async def mark_all_read(db: Database, recipient_id: str) -> None:
    with failure_boundary("Read all notifications"):
        await repository.mark_all_read(db, recipient_id)


async def create_notification(
    db: Database,
    notifier: RealtimeNotifier,
    payload: schemas.CreateNotificationRequest,
) -> dict:
    """
    Store a notification and push it to the recipient's private channel.

    The push is best effort: a disabled or failing relay does not undo the
    stored row.
    """
    recipient_id = str(payload.recipientId)
    with failure_boundary("Create notification"):
        row = await repository.insert_notification(
            db,
            recipient_id=recipient_id,
            notification_type=payload.type,
            title=payload.title,
            message=payload.message,
            reference_id=str(payload.referenceId) if payload.referenceId else None,
            metadata=payload.metadata,
        )

    notification = to_notification(row)
    delivered = await notifier.publish(
        user_channel(recipient_id),
        NEW_NOTIFICATION_EVENT,
        {
            "id": notification["id"],
            "type": notification["type"],
            "title": notification["title"],
            "message": notification["message"],
            "referenceId": notification["referenceId"],
        },
    )
    if not delivered:
        logger.debug("notification %s stored without realtime delivery", notification["id"])
    return notification
