"""Tests for resolving recipients and fanning notices out."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notices import (
    build_recipients,
    count_unread_notices,
    create_notice,
    fan_out_notice,
    list_inbox,
    list_sent,
)
from app.config import get_settings
from app.domain.entities import GroupRecipient, UserRecipient
from app.domain.exceptions import NoValidRecipientsError, NoticeValidationError
from app.utils import build_pagination_params


def _inbox(session, user):
    return list_inbox(session, user.id, pagination=build_pagination_params())


def test_group_and_direct_recipients_are_deduplicated(session, make_user, make_group) -> None:
    author = make_user("Staff")
    first, second, third = make_user("Ana"), make_user("Ben"), make_user("Cleo")
    group = make_group("Class 3B", [first, second])

    recipients = build_recipients(
        session,
        "Picture day on Friday",
        [f"group:{group.id}", second.id, third.id],
    )

    assert recipients == {first.id, second.id, third.id}
    assert author.id not in recipients


def test_create_notice_writes_one_unread_delivery_per_recipient(
    session, make_user, make_group
) -> None:
    author = make_user("Staff")
    first, second = make_user("Ana"), make_user("Ben")
    group = make_group("Class 3B", [first, second])

    result = create_notice(
        session,
        author_id=author.id,
        content="  Picture day on Friday  ",
        recipients=[GroupRecipient(group.id), UserRecipient(first.id)],
    )

    assert result.count == 2
    deliveries = [_inbox(session, user).data[0] for user in (first, second)]
    assert {delivery.content for delivery in deliveries} == {"Picture day on Friday"}
    assert all(not delivery.is_read and delivery.read_at is None for delivery in deliveries)
    assert deliveries[0].created_at == deliveries[1].created_at
    assert deliveries[0].id != deliveries[1].id
    assert count_unread_notices(session, first.id) == 1
    assert list_sent(session, author.id, pagination=build_pagination_params()).total == 2


def test_missing_group_contributes_no_one(session, make_user) -> None:
    with pytest.raises(NoValidRecipientsError):
        build_recipients(session, "Hello", [f"group:{uuid.uuid4()}"])


def test_missing_group_does_not_block_other_recipients(session, make_user) -> None:
    reader = make_user("Ana")

    assert build_recipients(session, "Hello", [f"group:{uuid.uuid4()}", reader.id]) == {reader.id}


def test_unknown_user_ids_are_dropped(session, make_user) -> None:
    with pytest.raises(NoValidRecipientsError):
        build_recipients(session, "Hello", [str(uuid.uuid4())])


@pytest.mark.parametrize(
    ("content", "recipients", "message"),
    [
        ("", ["someone"], "Content is required"),
        ("   ", ["someone"], "Content is required"),
        ("Hello", [], "At least one recipient is required"),
        ("Hello", None, "At least one recipient is required"),
    ],
)
def test_malformed_requests_are_rejected(session, content, recipients, message) -> None:
    with pytest.raises(NoticeValidationError, match=message):
        build_recipients(session, content, recipients)


def test_content_longer_than_limit_is_rejected(session, make_user, monkeypatch) -> None:
    author, reader = make_user("Staff"), make_user("Ana")
    monkeypatch.setattr(get_settings(), "notice_content_max_length", 10)

    with pytest.raises(NoticeValidationError):
        create_notice(session, author_id=author.id, content="x" * 11, recipients=[reader.id])

    assert _inbox(session, reader).total == 0


def test_fan_out_requires_recipients(session, make_user) -> None:
    author = make_user("Staff")

    with pytest.raises(NoValidRecipientsError):
        fan_out_notice(session, author_id=author.id, content="Hello", recipients=[])


def test_fan_out_writes_nothing_when_one_row_fails(session, make_user) -> None:
    author, reader = make_user("Staff"), make_user("Ana")

    with pytest.raises(SQLAlchemyError):
        fan_out_notice(
            session,
            author_id=author.id,
            content="Hello",
            recipients=[reader.id, str(uuid.uuid4())],
        )

    assert _inbox(session, reader).total == 0
    assert list_sent(session, author.id, pagination=build_pagination_params()).total == 0
