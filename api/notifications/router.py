"""
Notification API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_current_user, require_admin
from auth.identity import AuthenticatedUser
from core.db import Database, get_db
from realtime.notifier import RealtimeNotifier, get_notifier

from . import schemas, service

router = APIRouter()


@router.get("/api/notifications")
async def list_notifications(
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_notifications(db, current_user.id)


@router.get("/api/notifications/unread-count")
async def unread_count(
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    return {"unreadCount": await service.unread_count(db, current_user.id)}


@router.patch("/api/notifications/read-all")
async def read_all(
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    """
    Mark every notification of the caller as read.
    """
    await service.mark_all_read(db, current_user.id)
    return {"success": True}


@router.patch("/api/notifications/{notification_id}/read")
async def read_one(
    notification_id: UUID,
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    await service.mark_read(db, str(notification_id), recipient_id=current_user.id)
    return {"success": True}


@router.post(
    "/api/admin/notifications",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def admin_create_notification(
    payload: schemas.CreateNotificationRequest,
    db: Database = Depends(get_db),
    notifier: RealtimeNotifier = Depends(get_notifier),
) -> dict:
    notification = await service.create_notification(db, notifier, payload)
    return {"success": True, "data": notification}
