"""
Slider request schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field, RootModel


class CreateSlideRequest(BaseModel):
    imageUrl: str | None = Field(default=None, max_length=2048)
    title: str | None = Field(default=None, max_length=500)
    linkUrl: str | None = Field(default=None, max_length=2048)
    # The admin UI posts the position as `sortOrder`.
    sortOrder: int | None = None


class UpdateSlideRequest(BaseModel):
    title: str | None = Field(default=None, max_length=500)
    linkUrl: str | None = Field(default=None, max_length=2048)
    displayOrder: int | None = None
    isActive: bool | None = None


class SlideOrder(BaseModel):
    id: UUID
    displayOrder: int


class ReorderRequest(RootModel[list[SlideOrder]]):
    pass
