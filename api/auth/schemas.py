"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # Presence is checked by the service so a missing field maps to a 400.
    username: str | None = Field(default=None, max_length=150)
    password: str | None = Field(default=None, max_length=128)


class AdminUser(BaseModel):
    id: int
    username: str
    email: str | None = None
    role: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    user: AdminUser
