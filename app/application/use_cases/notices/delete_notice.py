"""Use case for deleting a notice delivery."""

import logging

from sqlalchemy.orm import Session

from app.domain.exceptions import NoticeNotFoundError
from app.infrastructure.repositories import NoticeRepository
from .access import assert_can_delete

logger = logging.getLogger(__name__)


def delete_notice(
    session: Session,
    notice_id: str,
    *,
    requesting_user_id: str,
    requesting_role: str | None,
) -> None:
    """Delete a single delivery; sibling deliveries of the same fan-out remain."""

    repository = NoticeRepository(session)
    delivery = repository.get(notice_id)
    if delivery is None:
        raise NoticeNotFoundError()
    assert_can_delete(delivery, requesting_user_id, requesting_role)
    repository.delete(notice_id)
    logger.info("User %s deleted notice %s", requesting_user_id, notice_id)
