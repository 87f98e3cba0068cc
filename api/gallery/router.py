"""
Gallery API endpoints (public list + admin management).
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from auth.dependencies import require_admin
from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/gallery")
async def list_gallery(
    category: str | None = Query(default=None, max_length=200),
    db: Database = Depends(get_db),
) -> dict:
    """
    Active gallery images, newest first.
    """
    return {"data": await service.list_public_images(db, category=category)}


@router.get("/api/admin/gallery", dependencies=[Depends(require_admin)])
async def admin_list_gallery(db: Database = Depends(get_db)) -> dict:
    return {"data": await service.list_admin_images(db)}


@router.post(
    "/api/admin/gallery",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def admin_create_gallery_image(
    payload: schemas.CreateGalleryImageRequest,
    db: Database = Depends(get_db),
) -> dict:
    image = await service.create_image(db, payload)
    return {"success": True, "data": image}


@router.patch("/api/admin/gallery/{image_id}", dependencies=[Depends(require_admin)])
async def admin_update_gallery_image(
    image_id: UUID,
    payload: schemas.UpdateGalleryImageRequest,
    db: Database = Depends(get_db),
) -> dict:
    await service.update_image(db, str(image_id), payload)
    return {"success": True}


@router.delete("/api/admin/gallery/{image_id}", dependencies=[Depends(require_admin)])
async def admin_delete_gallery_image(
    image_id: UUID,
    db: Database = Depends(get_db),
) -> dict:
    await service.delete_image(db, str(image_id))
    return {"success": True}
