"""Ownership checks consulted before any notice mutation."""

from app.domain.entities import ADMIN_ROLE_ALIAS, NoticeDelivery
from app.domain.exceptions import NoticeAccessDeniedError


def assert_can_toggle_read(delivery: NoticeDelivery, requesting_user_id: str) -> None:
    """Only the recipient of ``delivery`` may change its read state."""

    if requesting_user_id != delivery.recipient_id:
        raise NoticeAccessDeniedError(
            "You do not have permission to change the read state of this notice"
        )


def assert_can_delete(
    delivery: NoticeDelivery, requesting_user_id: str, requesting_role: str | None
) -> None:
    """Only the author of ``delivery`` or an administrator may delete it."""

    if requesting_user_id == delivery.author_id:
        return
    if (requesting_role or "").lower() == ADMIN_ROLE_ALIAS:
        return
    raise NoticeAccessDeniedError("You do not have permission to delete this notice")


def can_view(delivery: NoticeDelivery, requesting_user_id: str, requesting_role: str | None) -> bool:
    return (
        requesting_user_id in (delivery.recipient_id, delivery.author_id)
        or (requesting_role or "").lower() == ADMIN_ROLE_ALIAS
    )


__all__ = ["assert_can_delete", "assert_can_toggle_read", "can_view"]
