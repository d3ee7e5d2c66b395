"""Directory of users and groups a notice can be addressed to."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import UserSummary
from app.infrastructure.repositories import GroupRepository, UserRepository


@dataclass(frozen=True)
class GroupSummary:
    id: str
    name: str


@dataclass
class RecipientDirectory:
    users: list[UserSummary] = field(default_factory=list)
    groups: list[GroupSummary] = field(default_factory=list)


def list_recipient_candidates(session: Session) -> RecipientDirectory:
    """Return active users and all groups for the notice composer."""

    limit = get_settings().recipient_directory_limit
    users = UserRepository(session).list_active_summaries(limit=limit)
    groups = [
        GroupSummary(id=group_id, name=name)
        for group_id, name in GroupRepository(session).list_names()
    ]
    return RecipientDirectory(users=list(users), groups=groups)


__all__ = ["GroupSummary", "RecipientDirectory", "list_recipient_candidates"]
