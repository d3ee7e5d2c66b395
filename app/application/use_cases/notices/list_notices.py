"""Use cases for reading inbox and sent notice lists."""

from sqlalchemy.orm import Session

from app.domain.entities import NoticeDelivery, User
from app.domain.exceptions import NoticeAccessDeniedError, NoticeNotFoundError
from app.infrastructure.repositories import NoticeRepository
from app.utils import Page, PaginationParams, build_page
from .access import can_view


def list_inbox(
    session: Session,
    recipient_id: str,
    *,
    pagination: PaginationParams,
    is_read: bool | None = None,
) -> Page[NoticeDelivery]:
    """Return the recipient's deliveries, optionally filtered by read state."""

    items, total = NoticeRepository(session).list_for_recipient(
        recipient_id, params=pagination, is_read=is_read
    )
    return build_page(items, total=total, params=pagination)


def list_sent(
    session: Session, author_id: str, *, pagination: PaginationParams
) -> Page[NoticeDelivery]:
    """Return the deliveries authored by ``author_id``, one row per recipient."""

    items, total = NoticeRepository(session).list_for_author(author_id, params=pagination)
    return build_page(items, total=total, params=pagination)


def get_notice(session: Session, notice_id: str, *, requesting_user: User) -> NoticeDelivery:
    """Return one delivery if the requester is its recipient, author or an admin."""

    delivery = NoticeRepository(session).get(notice_id)
    if delivery is None:
        raise NoticeNotFoundError()
    if not can_view(delivery, requesting_user.id, requesting_user.role.alias):
        raise NoticeAccessDeniedError("You do not have permission to view this notice")
    return delivery


__all__ = ["get_notice", "list_inbox", "list_sent"]
