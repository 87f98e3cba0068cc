"""
Auth persistence helpers.
"""

from __future__ import annotations

from core.db import Database


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def get_user_by_email(db: Database, email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, password_hash, name, role, status, profile_image
        FROM users
        WHERE lower(email) = lower($1)
          AND deleted_at IS NULL
        LIMIT 1
        """,
        normalize_email(email),
    )


async def get_active_user_by_id(db: Database, user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, name, role, status, profile_image
        FROM users
        WHERE id = $1::uuid
          AND deleted_at IS NULL
        LIMIT 1
        """,
        user_id,
    )


async def get_user_by_id(db: Database, user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, name, role, status, profile_image
        FROM users
        WHERE id = $1::uuid
        LIMIT 1
        """,
        user_id,
    )
