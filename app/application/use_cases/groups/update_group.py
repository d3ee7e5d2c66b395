"""Use case for renaming a group or replacing its members."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Group
from app.domain.exceptions import GroupNotFoundError, GroupValidationError
from app.infrastructure.repositories import GroupRepository, UserRepository
from .validators import ensure_valid_group_name, ensure_valid_members


def update_group(
    session: Session,
    group_id: str,
    *,
    name: str | None = None,
    member_ids: Sequence[str] | None = None,
) -> Group:
    """Apply the provided changes; membership is replaced, never merged."""

    if name is None and member_ids is None:
        raise GroupValidationError("At least one field must be provided for update")

    repository = GroupRepository(session)
    if repository.get(group_id) is None:
        raise GroupNotFoundError()

    group_name = ensure_valid_group_name(name) if name is not None else None
    members = (
        ensure_valid_members(member_ids, UserRepository(session))
        if member_ids is not None
        else None
    )
    return repository.update(group_id, name=group_name, member_ids=members)
