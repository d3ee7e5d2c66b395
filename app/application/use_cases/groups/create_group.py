"""Use case for creating user groups."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Group
from app.infrastructure.repositories import GroupRepository, UserRepository
from app.utils import now_in_app_timezone
from .validators import ensure_valid_group_name, ensure_valid_members

logger = logging.getLogger(__name__)


def create_group(session: Session, *, name: str, member_ids: Sequence[str]) -> Group:
    """Create a named group with the given members."""

    group_name = ensure_valid_group_name(name)
    members = ensure_valid_members(member_ids, UserRepository(session))

    group = GroupRepository(session).create(
        Group(
            id=None,
            name=group_name,
            member_ids=members,
            created_at=now_in_app_timezone(),
        )
    )
    logger.info("Created group %s with %d members", group.id, len(group.member_ids))
    return group
