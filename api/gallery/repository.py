"""
Gallery image persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

_COLUMNS = "id, image_url, title, category, is_active, created_at"


async def list_active_images(db: Database, *, category: str | None = None) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM gallery_images
        WHERE is_active = true
          AND ($1::text IS NULL OR category = $1)
        ORDER BY created_at DESC
        """,
        category,
    )


async def list_all_images(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM gallery_images
        ORDER BY created_at DESC
        """
    )


async def insert_image(
    db: Database,
    *,
    image_url: str,
    category: str,
    title: str | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO gallery_images (image_url, title, category, is_active)
        VALUES ($1, $2, $3, true)
        RETURNING {_COLUMNS}
        """,
        image_url,
        title,
        category,
    )
    if row is None:
        raise RuntimeError("Failed to insert gallery image.")
    return row


async def update_image(
    db: Database,
    image_id: str,
    *,
    title: str | None = None,
    category: str | None = None,
    is_active: bool | None = None,
) -> None:
    # NULL arguments keep the current column value.
    await db.execute(
        """
        UPDATE gallery_images
        SET title = COALESCE($2, title),
            category = COALESCE($3, category),
            is_active = COALESCE($4, is_active)
        WHERE id = $1::uuid
        """,
        image_id,
        title,
        category,
        is_active,
    )


async def delete_image(db: Database, image_id: str) -> None:
    await db.execute(
        """
        DELETE FROM gallery_images
        WHERE id = $1::uuid
        """,
        image_id,
    )
