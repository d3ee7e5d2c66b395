"""Use case for listing groups."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Group
from app.infrastructure.repositories import GroupRepository


def list_groups(session: Session) -> Sequence[Group]:
    """Return every group ordered by name."""

    return GroupRepository(session).list()
