"""
Slider API endpoints (public list, reorder, admin management).
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from auth.dependencies import require_admin
from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/slider")
async def list_slider(db: Database = Depends(get_db)) -> dict:
    """
    Active slides ordered by display order, then newest first.
    """
    return {"data": await service.list_public_slides(db)}


@router.patch("/api/slider/reorder", dependencies=[Depends(require_admin)])
async def reorder_slider(
    payload: schemas.ReorderRequest,
    db: Database = Depends(get_db),
) -> dict:
    await service.reorder(db, payload)
    return {"success": True}


@router.get("/api/admin/slider", dependencies=[Depends(require_admin)])
async def admin_list_slider(db: Database = Depends(get_db)) -> dict:
    return {"data": await service.list_admin_slides(db)}


@router.post(
    "/api/admin/slider",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def admin_create_slide(
    payload: schemas.CreateSlideRequest,
    db: Database = Depends(get_db),
) -> dict:
    slide = await service.create_slide(db, payload)
    return {"success": True, "data": slide}


@router.patch("/api/admin/slider/{slide_id}", dependencies=[Depends(require_admin)])
async def admin_update_slide(
    slide_id: UUID,
    payload: schemas.UpdateSlideRequest,
    db: Database = Depends(get_db),
) -> dict:
    await service.update_slide(db, str(slide_id), payload)
    return {"success": True}


@router.delete("/api/admin/slider/{slide_id}", dependencies=[Depends(require_admin)])
async def admin_delete_slide(
    slide_id: UUID,
    db: Database = Depends(get_db),
) -> dict:
    await service.delete_slide(db, str(slide_id))
    return {"success": True}
