"""Domain entity representing a single notice delivery."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import UserSummary


@dataclass
class NoticeDelivery:
    """One recipient's copy of an authored notice.

    ``content``, ``author_id`` and ``recipient_id`` never change after the
    fan-out that created the row. ``read_at`` is set exactly when ``is_read``
    is true.
    """

    id: str | None
    content: str
    author_id: str
    recipient_id: str
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None
    author: UserSummary | None = None
    recipient: UserSummary | None = None


@dataclass(frozen=True)
class NoticeCreationResult:
    """Outcome of a fan-out; ``count`` is the number of deliveries written."""

    count: int


__all__ = ["NoticeCreationResult", "NoticeDelivery"]
