"""
Slider image persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

_COLUMNS = "id, image_url, title, link_url, display_order, is_active, created_at"


async def list_active_slides(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM slider_images
        WHERE is_active = true
        ORDER BY display_order ASC, created_at DESC
        """
    )


async def list_all_slides(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM slider_images
        ORDER BY display_order ASC, created_at DESC
        """
    )


async def insert_slide(
    db: Database,
    *,
    image_url: str,
    title: str | None = None,
    link_url: str | None = None,
    display_order: int = 0,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO slider_images (image_url, title, link_url, display_order, is_active)
        VALUES ($1, $2, $3, $4, true)
        RETURNING {_COLUMNS}
        """,
        image_url,
        title,
        link_url,
        display_order,
    )
    if row is None:
        raise RuntimeError("Failed to insert slider image.")
    return row


async def update_slide(
    db: Database,
    slide_id: str,
    *,
    title: str | None = None,
    link_url: str | None = None,
    display_order: int | None = None,
    is_active: bool | None = None,
) -> None:
    await db.execute(
        """
        UPDATE slider_images
        SET title = COALESCE($2, title),
            link_url = COALESCE($3, link_url),
            display_order = COALESCE($4, display_order),
            is_active = COALESCE($5, is_active)
        WHERE id = $1::uuid
        """,
        slide_id,
        title,
        link_url,
        display_order,
        is_active,
    )


async def delete_slide(db: Database, slide_id: str) -> None:
    await db.execute(
        """
        DELETE FROM slider_images
        WHERE id = $1::uuid
        """,
        slide_id,
    )


async def reorder_slides(db: Database, orders: list[tuple[str, int]]) -> None:
    await db.execute_many(
        """
        UPDATE slider_images
        SET display_order = $2
        WHERE id = $1::uuid
        """,
        orders,
    )
