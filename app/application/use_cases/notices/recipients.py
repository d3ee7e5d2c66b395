"""Resolution of raw recipient lists into a deduplicated set of user ids."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.use_cases.groups import resolve_group_members
from app.domain.entities import (
    GroupRecipient,
    RecipientReference,
    UserRecipient,
    parse_recipient_reference,
)
from app.domain.exceptions import NoValidRecipientsError, NoticeValidationError
from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def partition_recipients(
    raw_recipients: Sequence[RecipientReference | str],
) -> tuple[set[str], set[str]]:
    """Split references into ``(user_ids, group_ids)``."""

    user_ids: set[str] = set()
    group_ids: set[str] = set()
    for raw in raw_recipients:
        reference = parse_recipient_reference(raw) if isinstance(raw, str) else raw
        if isinstance(reference, GroupRecipient):
            if reference.group_id:
                group_ids.add(reference.group_id)
        elif isinstance(reference, UserRecipient):
            if reference.user_id:
                user_ids.add(reference.user_id)
        else:
            raise NoticeValidationError(f"Unsupported recipient reference: {raw!r}")
    return user_ids, group_ids


def build_recipients(
    session: Session,
    content: str | None,
    raw_recipients: Sequence[RecipientReference | str] | None,
) -> set[str]:
    """Return the set of user ids a notice should be delivered to.

    Group members and direct user ids are merged with set semantics, so a user
    reachable both ways appears once. Direct ids with no stored user are dropped.
    """

    if not content or not content.strip():
        raise NoticeValidationError("Content is required")
    if not raw_recipients:
        raise NoticeValidationError("At least one recipient is required")

    user_ids, group_ids = partition_recipients(raw_recipients)

    recipients: set[str] = set()
    for group_id in sorted(group_ids):
        members = resolve_group_members(session, group_id)
        if not members:
            logger.info("Group %s contributed no recipients", group_id)
        recipients |= members
    known_user_ids = UserRepository(session).existing_ids(user_ids)
    if len(known_user_ids) != len(user_ids):
        logger.info("Ignoring unknown recipient ids: %s", sorted(user_ids - known_user_ids))
    recipients |= known_user_ids

    if not recipients:
        raise NoValidRecipientsError()
    return recipients


__all__ = ["build_recipients", "partition_recipients"]
