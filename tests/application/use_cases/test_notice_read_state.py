"""Tests for read/unread transitions, bulk marking and deletion."""

from __future__ import annotations

import uuid

import pytest

from app.application.use_cases.notices import (
    count_unread_notices,
    create_notice,
    delete_notice,
    list_inbox,
    mark_all_notices_read,
    mark_notice_read,
    mark_notice_unread,
)
from app.domain.exceptions import NoticeAccessDeniedError, NoticeNotFoundError
from app.infrastructure.repositories import NoticeRepository
from app.utils import build_pagination_params


@pytest.fixture()
def delivered(session, make_user):
    """Send one notice from an author to two readers."""

    author, first, second = make_user("Staff"), make_user("Ana"), make_user("Ben")
    create_notice(session, author_id=author.id, content="Picture day", recipients=[first.id, second.id])

    def _delivery_for(user):
        return list_inbox(session, user.id, pagination=build_pagination_params()).data[0]

    return author, first, second, _delivery_for


def test_mark_read_then_unread_keeps_read_at_consistent(session, delivered) -> None:
    _, reader, _, delivery_for = delivered
    delivery = delivery_for(reader)

    read = mark_notice_read(session, delivery.id, reader.id)
    assert read.is_read is True
    assert read.read_at is not None

    unread = mark_notice_unread(session, delivery.id, reader.id)
    assert unread.is_read is False
    assert unread.read_at is None


def test_mark_read_twice_succeeds(session, delivered) -> None:
    _, reader, _, delivery_for = delivered
    delivery = delivery_for(reader)

    first = mark_notice_read(session, delivery.id, reader.id)
    second = mark_notice_read(session, delivery.id, reader.id)

    assert second.is_read is True
    assert second.read_at >= first.read_at
    assert count_unread_notices(session, reader.id) == 0


def test_other_users_cannot_toggle_read_state(session, delivered) -> None:
    author, reader, other, delivery_for = delivered
    delivery = delivery_for(reader)

    for intruder in (author, other):
        with pytest.raises(NoticeAccessDeniedError):
            mark_notice_read(session, delivery.id, intruder.id)

    stored = NoticeRepository(session).get(delivery.id)
    assert stored.is_read is False
    assert stored.read_at is None


def test_other_users_cannot_mark_a_read_notice_unread(session, delivered) -> None:
    author, reader, other, delivery_for = delivered
    delivery = delivery_for(reader)
    read = mark_notice_read(session, delivery.id, reader.id)

    for intruder in (author, other):
        with pytest.raises(NoticeAccessDeniedError):
            mark_notice_unread(session, delivery.id, intruder.id)

    stored = NoticeRepository(session).get(delivery.id)
    assert stored.is_read is True
    assert stored.read_at == read.read_at


def test_unknown_notice_is_reported(session, delivered) -> None:
    _, reader, _, _ = delivered

    with pytest.raises(NoticeNotFoundError):
        mark_notice_read(session, str(uuid.uuid4()), reader.id)
    with pytest.raises(NoticeNotFoundError):
        mark_notice_unread(session, str(uuid.uuid4()), reader.id)


def test_mark_all_read_only_touches_the_callers_inbox(session, make_user, delivered) -> None:
    author, reader, other, _ = delivered
    create_notice(session, author_id=author.id, content="Second", recipients=[reader.id])
    assert count_unread_notices(session, reader.id) == 2

    assert mark_all_notices_read(session, reader.id) == 2
    assert count_unread_notices(session, reader.id) == 0
    assert count_unread_notices(session, other.id) == 1
    assert mark_all_notices_read(session, reader.id) == 0

    inbox = list_inbox(session, reader.id, pagination=build_pagination_params())
    assert all(item.is_read and item.read_at is not None for item in inbox.data)


def test_inbox_filter_by_read_state(session, delivered) -> None:
    _, reader, _, delivery_for = delivered
    mark_notice_read(session, delivery_for(reader).id, reader.id)
    params = build_pagination_params()

    assert list_inbox(session, reader.id, pagination=params, is_read=False).total == 0
    assert list_inbox(session, reader.id, pagination=params, is_read=True).total == 1


def test_author_deletes_one_delivery_and_siblings_remain(session, delivered) -> None:
    author, first, second, delivery_for = delivered

    delete_notice(session, delivery_for(first).id, requesting_user_id=author.id, requesting_role="user")

    params = build_pagination_params()
    assert list_inbox(session, first.id, pagination=params).total == 0
    assert list_inbox(session, second.id, pagination=params).total == 1


def test_recipient_cannot_delete_but_admin_can(session, make_user, delivered) -> None:
    _, reader, _, delivery_for = delivered
    admin = make_user("Principal", admin=True)
    delivery = delivery_for(reader)

    with pytest.raises(NoticeAccessDeniedError):
        delete_notice(session, delivery.id, requesting_user_id=reader.id, requesting_role="user")

    delete_notice(session, delivery.id, requesting_user_id=admin.id, requesting_role="admin")
    with pytest.raises(NoticeNotFoundError):
        delete_notice(session, delivery.id, requesting_user_id=admin.id, requesting_role="admin")
