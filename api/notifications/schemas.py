"""
Notification schemas.
"""

from __future__ import annotations

from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

NotificationType = Literal[
    "mentorship_request",
    "mentorship_accepted",
    "mentorship_rejected",
    "mentorship_force_stopped",
    "job_application_update",
    "new_message",
    "system_alert",
    "job_approved",
    "job_rejected",
    "admin_announcement",
]


class CreateNotificationRequest(BaseModel):
    recipientId: UUID
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=500)
    message: str = Field(..., min_length=1, max_length=5000)
    referenceId: UUID | None = None
    metadata: dict[str, Any] | None = None
