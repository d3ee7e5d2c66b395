"""Schemas for group management endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    user_ids: list[UUID] = Field(..., min_length=1)


class GroupUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    user_ids: list[UUID] | None = Field(default=None, min_length=1)


class GroupRead(BaseModel):
    id: str
    name: str
    user_ids: list[str]
    created_at: datetime | None
    updated_at: datetime | None


class GroupSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
