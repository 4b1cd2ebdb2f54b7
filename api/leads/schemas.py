"""
Pydantic schemas for lead submission endpoints.

Required fields are optional at the schema level; the service decides what
is missing so the client gets one readable 400 message.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContactRequest(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    model_interest: str | None = Field(default=None, max_length=200)
    message: str | None = Field(default=None, max_length=5000)


class TestDriveRequest(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    model: str | None = Field(default=None, max_length=200)
    preferred_date: str | None = Field(default=None, max_length=50)
    preferred_time: str | None = Field(default=None, max_length=50)
    notes: str | None = Field(default=None, max_length=5000)


class StatusUpdateRequest(BaseModel):
    status: str | None = Field(default=None, max_length=50)
