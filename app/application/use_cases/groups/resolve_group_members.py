"""Use case for expanding a group into its member user ids."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import GroupRepository


def resolve_group_members(session: Session, group_id: str) -> set[str]:
    """Return the ids of the users currently in ``group_id``.

    Unknown groups and groups without members both yield an empty set; callers
    treat them as contributing no recipients.
    """

    if not group_id:
        return set()
    return GroupRepository(session).member_ids(group_id)
