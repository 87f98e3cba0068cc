"""
Slider business logic.
"""

from __future__ import annotations

from core.db import Database
from core.errors import BadRequest, failure_boundary

from . import repository, schemas


def to_slide(row: dict) -> dict:
    return {
        "id": str(row["id"]),
        "imageUrl": row.get("image_url"),
        "title": row.get("title"),
        "linkUrl": row.get("link_url"),
        "displayOrder": int(row.get("display_order") or 0),
        "isActive": bool(row.get("is_active")),
        "createdAt": row.get("created_at"),
    }


async def list_public_slides(db: Database) -> list[dict]:
    with failure_boundary("Public slider list"):
        rows = await repository.list_active_slides(db)
    return [to_slide(row) for row in rows]


async def list_admin_slides(db: Database) -> list[dict]:
    with failure_boundary("Admin slider list"):
        rows = await repository.list_all_slides(db)
    return [to_slide(row) for row in rows]


async def create_slide(db: Database, payload: schemas.CreateSlideRequest) -> dict:
    image_url = (payload.imageUrl or "").strip()
    if not image_url:
        raise BadRequest("Image URL is required")

    with failure_boundary("Admin slider create"):
        row = await repository.insert_slide(
            db,
            image_url=image_url,
            title=(payload.title or "").strip() or None,
            link_url=(payload.linkUrl or "").strip() or None,
            display_order=payload.sortOrder or 0,
        )
    return to_slide(row)


async def update_slide(db: Database, slide_id: str, payload: schemas.UpdateSlideRequest) -> None:
    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise BadRequest("No data provided")

    with failure_boundary("Admin slider update"):
        await repository.update_slide(
            db,
            slide_id,
            title=changes.get("title"),
            link_url=changes.get("linkUrl"),
            display_order=changes.get("displayOrder"),
            is_active=changes.get("isActive"),
        )


async def delete_slide(db: Database, slide_id: str) -> None:
    with failure_boundary("Admin slider delete"):
        await repository.delete_slide(db, slide_id)


async def reorder(db: Database, payload: schemas.ReorderRequest) -> None:
    orders = [(str(item.id), item.displayOrder) for item in payload.root]
    if not orders:
        return None
    with failure_boundary("Slider reorder"):
        await repository.reorder_slides(db, orders)
