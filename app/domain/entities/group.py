"""Domain entity representing a named group of users."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Group:
    """A set of users that can be addressed together as notice recipients."""

    id: str | None
    name: str
    member_ids: set[str] = field(default_factory=set)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Group"]
