"""
Pydantic schemas for admin inventory endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.db import INT4_MAX


class CarCreateRequest(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    tagline: str | None = Field(default=None, max_length=300)
    description: str | None = None
    price: int | None = Field(default=None, ge=0, le=INT4_MAX)
    horsepower: int | None = Field(default=None, ge=0, le=INT4_MAX)
    acceleration: float | None = Field(default=None, ge=0)
    top_speed: int | None = Field(default=None, ge=0, le=INT4_MAX)
    image_url: str | None = Field(default=None, max_length=2000)
    featured: int | None = Field(default=None, ge=0, le=1)


class CarUpdateRequest(BaseModel):
    """
    Partial car update. Only the fields sent by the client are written;
    anything not declared here is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    tagline: str | None = Field(default=None, max_length=300)
    description: str | None = None
    price: int | None = Field(default=None, ge=0, le=INT4_MAX)
    horsepower: int | None = Field(default=None, ge=0, le=INT4_MAX)
    acceleration: float | None = Field(default=None, ge=0)
    top_speed: int | None = Field(default=None, ge=0, le=INT4_MAX)
    image_url: str | None = Field(default=None, max_length=2000)
    featured: int | None = Field(default=None, ge=0, le=1)
    active: int | None = Field(default=None, ge=0, le=1)
