"""Use case for retrieving a single group."""

from sqlalchemy.orm import Session

from app.domain.entities import Group
from app.domain.exceptions import GroupNotFoundError
from app.infrastructure.repositories import GroupRepository


def get_group(session: Session, group_id: str) -> Group:
    group = GroupRepository(session).get(group_id)
    if group is None:
        raise GroupNotFoundError()
    return group
