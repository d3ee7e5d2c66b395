"""Use case for deleting a group."""

from sqlalchemy.orm import Session

from app.domain.exceptions import GroupNotFoundError
from app.infrastructure.repositories import GroupRepository


def delete_group(session: Session, group_id: str) -> None:
    """Delete the group together with its membership edges."""

    repository = GroupRepository(session)
    if repository.get(group_id) is None:
        raise GroupNotFoundError()
    repository.delete(group_id)
