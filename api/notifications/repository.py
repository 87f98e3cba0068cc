"""
Notification persistence (raw SQL).

Every query is scoped by `recipient_id`; callers pass the id of the
authenticated user, never a client-supplied one.
"""

from __future__ import annotations

import json

from core.db import Database

_COLUMNS = "id, recipient_id, type, reference_id, title, message, metadata, is_read, created_at, read_at"


def _json_dumps(value: object) -> str:
    return json.dumps(value, ensure_ascii=True)


async def list_for_recipient(db: Database, recipient_id: str, *, limit: int = 50) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM notifications
        WHERE recipient_id = $1::uuid
        ORDER BY created_at DESC
        LIMIT $2
        """,
        recipient_id,
        limit,
    )


async def count_unread(db: Database, recipient_id: str) -> int:
    value = await db.fetch_value(
        """
        SELECT count(*)
        FROM notifications
        WHERE recipient_id = $1::uuid
          AND is_read = false
        """,
        recipient_id,
    )
    return int(value or 0)


async def mark_read(db: Database, notification_id: str, *, recipient_id: str) -> None:
    await db.execute(
        """
        UPDATE notifications
        SET is_read = true,
            read_at = now()
        WHERE id = $1::uuid
          AND recipient_id = $2::uuid
        """,
        notification_id,
        recipient_id,
    )


async def mark_all_read(db: Database, recipient_id: str) -> None:
    await db.execute(
        """
        UPDATE notifications
        SET is_read = true,
            read_at = now()
        WHERE recipient_id = $1::uuid
        """,
        recipient_id,
    )


async def insert_notification(
    db: Database,
    *,
    recipient_id: str,
    notification_type: str,
    title: str,
    message: str,
    reference_id: str | None = None,
    metadata: dict | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO notifications (recipient_id, type, title, message, reference_id, metadata, is_read)
        VALUES ($1::uuid, $2, $3, $4, $5::uuid, $6::jsonb, false)
        RETURNING {_COLUMNS}
        """,
        recipient_id,
        notification_type,
        title,
        message,
        reference_id,
        _json_dumps(metadata) if metadata is not None else None,
    )
    if row is None:
        raise RuntimeError("Failed to insert notification.")
    return row
