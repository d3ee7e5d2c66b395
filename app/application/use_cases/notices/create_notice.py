"""Use case for authoring a notice and fanning it out to its recipients."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import NoticeCreationResult, NoticeDelivery, RecipientReference
from app.domain.exceptions import NoValidRecipientsError, NoticeValidationError
from app.infrastructure.repositories import NoticeRepository
from app.utils import now_in_app_timezone
from .recipients import build_recipients

logger = logging.getLogger(__name__)


def fan_out_notice(
    session: Session,
    *,
    author_id: str,
    content: str,
    recipients: Iterable[str],
) -> int:
    """Persist one unread delivery per recipient and return how many were written.

    All rows share ``content``, ``author_id`` and the same ``created_at`` and are
    committed as a single batch.
    """

    recipient_ids = sorted(set(recipients))
    if not recipient_ids:
        raise NoValidRecipientsError()

    created_at = now_in_app_timezone()
    deliveries = [
        NoticeDelivery(
            id=None,
            content=content,
            author_id=author_id,
            recipient_id=recipient_id,
            is_read=False,
            read_at=None,
            created_at=created_at,
        )
        for recipient_id in recipient_ids
    ]
    return NoticeRepository(session).create_many(deliveries)


def create_notice(
    session: Session,
    *,
    author_id: str,
    content: str | None,
    recipients: Sequence[RecipientReference | str] | None,
) -> NoticeCreationResult:
    """Validate the request, resolve recipients and write the deliveries."""

    recipient_ids = build_recipients(session, content, recipients)

    body = content.strip()
    max_length = get_settings().notice_content_max_length
    if len(body) > max_length:
        raise NoticeValidationError(
            f"Content must be at most {max_length} characters"
        )

    count = fan_out_notice(
        session,
        author_id=author_id,
        content=body,
        recipients=recipient_ids,
    )
    logger.info("User %s sent a notice to %d recipients", author_id, count)
    return NoticeCreationResult(count=count)


__all__ = ["create_notice", "fan_out_notice"]
