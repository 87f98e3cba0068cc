"""
Gallery request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateGalleryImageRequest(BaseModel):
    imageUrl: str | None = Field(default=None, max_length=2048)
    category: str | None = Field(default=None, max_length=200)
    title: str | None = Field(default=None, max_length=500)


class UpdateGalleryImageRequest(BaseModel):
    title: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=200)
    isActive: bool | None = None
