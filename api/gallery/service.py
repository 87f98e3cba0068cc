"""
Gallery business logic: filtering rules and response shaping.
"""

from __future__ import annotations

from core.db import Database
from core.errors import BadRequest, failure_boundary

from . import repository, schemas

ALL_CATEGORIES = "All"


def normalize_category(category: str | None) -> str | None:
    """
    `None`, blank and "All" mean no category filter.
    """
    value = (category or "").strip()
    if not value or value == ALL_CATEGORIES:
        return None
    return value


def to_gallery_image(row: dict) -> dict:
    return {
        "id": str(row["id"]),
        "imageUrl": row.get("image_url"),
        "title": row.get("title"),
        "category": row.get("category"),
        "isActive": bool(row.get("is_active")),
        "createdAt": row.get("created_at"),
    }


async def list_public_images(db: Database, *, category: str | None = None) -> list[dict]:
    with failure_boundary("Public gallery list"):
        rows = await repository.list_active_images(db, category=normalize_category(category))
    return [to_gallery_image(row) for row in rows]


async def list_admin_images(db: Database) -> list[dict]:
    with failure_boundary("Admin gallery list"):
        rows = await repository.list_all_images(db)
    return [to_gallery_image(row) for row in rows]


async def create_image(db: Database, payload: schemas.CreateGalleryImageRequest) -> dict:
    image_url = (payload.imageUrl or "").strip()
    category = (payload.category or "").strip()
    if not image_url:
        raise BadRequest("Image URL is required")
    if not category:
        raise BadRequest("Category is required")

    with failure_boundary("Admin gallery create"):
        row = await repository.insert_image(
            db,
            image_url=image_url,
            category=category,
            title=(payload.title or "").strip() or None,
        )
    return to_gallery_image(row)


async def update_image(
    db: Database,
    image_id: str,
    payload: schemas.UpdateGalleryImageRequest,
) -> None:
    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise BadRequest("No data provided")

    with failure_boundary("Admin gallery update"):
        await repository.update_image(
            db,
            image_id,
            title=changes.get("title"),
            category=changes.get("category"),
            is_active=changes.get("isActive"),
        )


async def delete_image(db: Database, image_id: str) -> None:
    with failure_boundary("Admin gallery delete"):
        await repository.delete_image(db, image_id)
