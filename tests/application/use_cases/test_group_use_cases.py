"""Tests for group management and member resolution."""

from __future__ import annotations

import uuid

import pytest

from app.application.use_cases.groups import (
    create_group,
    delete_group,
    get_group,
    list_groups,
    resolve_group_members,
    update_group,
)
from app.domain.exceptions import GroupNotFoundError, GroupValidationError


def test_create_group_stores_members(session, make_user) -> None:
    first, second = make_user("Ana"), make_user("Ben")

    group = create_group(session, name="  Class 3B ", member_ids=[first.id, second.id])

    assert group.name == "Class 3B"
    assert resolve_group_members(session, group.id) == {first.id, second.id}
    assert [item.name for item in list_groups(session)] == ["Class 3B"]


@pytest.mark.parametrize(
    ("name", "members", "message"),
    [
        ("", None, "Group name is required"),
        ("x" * 101, None, "at most"),
        ("Class", [], "At least one member is required"),
        ("Class", "duplicate", "Duplicate user IDs"),
        ("Class", "unknown", "Unknown user IDs"),
    ],
)
def test_invalid_groups_are_rejected(session, make_user, name, members, message) -> None:
    user = make_user("Ana")
    if members == "duplicate":
        member_ids = [user.id, user.id]
    elif members == "unknown":
        member_ids = [user.id, str(uuid.uuid4())]
    else:
        member_ids = [user.id] if members is None else members

    with pytest.raises(GroupValidationError, match=message):
        create_group(session, name=name, member_ids=member_ids)


def test_update_replaces_membership(session, make_user, make_group) -> None:
    first, second = make_user("Ana"), make_user("Ben")
    group = make_group("Class 3B", [first])

    updated = update_group(session, group.id, name="Class 4B", member_ids=[second.id])

    assert updated.name == "Class 4B"
    assert resolve_group_members(session, group.id) == {second.id}


def test_update_requires_a_change(session, make_user, make_group) -> None:
    group = make_group("Class 3B", [make_user("Ana")])

    with pytest.raises(GroupValidationError):
        update_group(session, group.id)
    with pytest.raises(GroupNotFoundError):
        update_group(session, str(uuid.uuid4()), name="Other")


def test_delete_group_leaves_members(session, make_user, make_group) -> None:
    member = make_user("Ana")
    group = make_group("Class 3B", [member])

    delete_group(session, group.id)

    assert resolve_group_members(session, group.id) == set()
    with pytest.raises(GroupNotFoundError):
        get_group(session, group.id)
    with pytest.raises(GroupNotFoundError):
        delete_group(session, group.id)


def test_unknown_group_resolves_to_no_members(session) -> None:
    assert resolve_group_members(session, str(uuid.uuid4())) == set()
