"""Pydantic models describing notice payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import GROUP_PREFIX, RecipientReference, parse_recipient_reference

from .group import GroupSummaryRead
from .user import UserSummaryRead

T = TypeVar("T")


class NoticeCreate(BaseModel):
    """Payload used to author a notice.

    ``recipients`` holds user ids and ``group:<id>`` references. Ids are
    rewritten to the canonical lowercase dashed UUID form. Blank content and an
    empty list are left to the use case so they are reported like other
    notice validation errors.
    """

    content: str = Field(..., description="Notice body")
    recipients: list[str] = Field(..., description="User ids or group:<id>")

    @field_validator("recipients")
    @classmethod
    def _canonical_recipient_ids(cls, values: list[str]) -> list[str]:
        canonical = []
        for raw in values:
            candidate = raw.strip()
            prefix = ""
            if candidate.startswith(GROUP_PREFIX):
                prefix = GROUP_PREFIX
                candidate = candidate[len(GROUP_PREFIX):].strip()
            try:
                canonical.append(f"{prefix}{UUID(candidate)}")
            except ValueError as exc:
                raise ValueError(f"Invalid recipient ID format: {raw!r}") from exc
        return canonical

    def references(self) -> list[RecipientReference]:
        """Return the decoded recipient references."""

        return [parse_recipient_reference(raw) for raw in self.recipients]


class NoticeCreated(BaseModel):
    count: int


class NoticeCount(BaseModel):
    count: int


class NoticeRead(BaseModel):
    """Representation of one notice delivery."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    author_id: str
    recipient_id: str
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime
    author: UserSummaryRead | None = None
    recipient: UserSummaryRead | None = None


class PageRead(BaseModel, Generic[T]):
    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


class RecipientDirectoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    users: list[UserSummaryRead]
    groups: list[GroupSummaryRead]


__all__ = [
    "NoticeCount",
    "NoticeCreate",
    "NoticeCreated",
    "NoticeRead",
    "PageRead",
    "RecipientDirectoryRead",
]
