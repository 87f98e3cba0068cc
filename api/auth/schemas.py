"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1, max_length=128)


class SessionUser(BaseModel):
    id: str
    email: str
    role: str
    name: str
    status: str


class LoginResponse(BaseModel):
    user: SessionUser
    code: str = "OK"


class MeUser(SessionUser):
    profileImage: str | None = None


class MeResponse(BaseModel):
    user: MeUser


class RefreshResponse(BaseModel):
    accessToken: str


class SuccessResponse(BaseModel):
    success: bool = True
