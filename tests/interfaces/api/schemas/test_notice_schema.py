"""Tests for the notice creation payload."""

from __future__ import annotations

import uuid

import pytest
from pydantic import ValidationError

from app.domain.entities import GroupRecipient, UserRecipient
from app.interfaces.api.schemas import NoticeCreate


def test_recipient_ids_are_canonicalized() -> None:
    user_id, group_id = uuid.uuid4(), uuid.uuid4()

    payload = NoticeCreate(
        content="Hello",
        recipients=[str(user_id).upper(), f" group:{group_id.hex.upper()} "],
    )

    assert payload.recipients == [str(user_id), f"group:{group_id}"]
    assert payload.references() == [UserRecipient(str(user_id)), GroupRecipient(str(group_id))]


@pytest.mark.parametrize("raw", ["not-an-id", "group:", "group:abc", "user:" + str(uuid.uuid4())])
def test_malformed_recipient_ids_are_rejected(raw: str) -> None:
    with pytest.raises(ValidationError):
        NoticeCreate(content="Hello", recipients=[raw])


def test_blank_content_and_empty_list_reach_the_use_case() -> None:
    payload = NoticeCreate(content="  ", recipients=[])

    assert payload.references() == []
