"""Read/unread transitions and unread counters for notice deliveries."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import NoticeDelivery
from app.domain.exceptions import NoticeNotFoundError
from app.infrastructure.repositories import NoticeRepository
from app.utils import now_in_app_timezone
from .access import assert_can_toggle_read

logger = logging.getLogger(__name__)


def _load_for_toggle(
    repository: NoticeRepository, notice_id: str, requesting_user_id: str
) -> NoticeDelivery:
    delivery = repository.get(notice_id)
    if delivery is None:
        raise NoticeNotFoundError()
    try:
        assert_can_toggle_read(delivery, requesting_user_id)
    except PermissionError:
        logger.info(
            "User %s tried to change read state of notice %s owned by %s",
            requesting_user_id,
            notice_id,
            delivery.recipient_id,
        )
        raise
    return delivery


def mark_notice_read(
    session: Session, notice_id: str, requesting_user_id: str
) -> NoticeDelivery:
    """Mark a delivery as read.

    The update is unconditional: calling it on an already read notice succeeds
    and refreshes ``read_at``.
    """

    repository = NoticeRepository(session)
    _load_for_toggle(repository, notice_id, requesting_user_id)
    return repository.set_read_state(
        notice_id, is_read=True, read_at=now_in_app_timezone()
    )


def mark_notice_unread(
    session: Session, notice_id: str, requesting_user_id: str
) -> NoticeDelivery:
    """Return a delivery to the unread state and clear ``read_at``."""

    repository = NoticeRepository(session)
    _load_for_toggle(repository, notice_id, requesting_user_id)
    return repository.set_read_state(notice_id, is_read=False, read_at=None)


def mark_all_notices_read(session: Session, recipient_id: str) -> int:
    """Mark every unread delivery of ``recipient_id`` as read; return the count."""

    count = NoticeRepository(session).mark_all_read(
        recipient_id, read_at=now_in_app_timezone()
    )
    logger.debug("Marked %d notices as read for user %s", count, recipient_id)
    return count


def count_unread_notices(session: Session, recipient_id: str) -> int:
    return NoticeRepository(session).count_unread(recipient_id)


__all__ = [
    "count_unread_notices",
    "mark_all_notices_read",
    "mark_notice_read",
    "mark_notice_unread",
]
