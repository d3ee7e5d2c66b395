"""End-to-end tests for sending notices and tracking their read state."""

from __future__ import annotations

import uuid

import pytest


@pytest.fixture()
def classroom(client, make_user, auth_headers):
    """A staff member, two pupils in a group and one pupil outside it."""

    staff = make_user("Staff", admin=True)
    ana, ben, cleo = make_user("Ana"), make_user("Ben"), make_user("Cleo")
    headers = {user.id: auth_headers(user) for user in (staff, ana, ben, cleo)}
    response = client.post(
        "/groups/", json={"name": "Class 3B", "user_ids": [ana.id, ben.id]}, headers=headers[staff.id]
    )
    assert response.status_code == 201
    return staff, ana, ben, cleo, response.json()["id"], headers


def _send(client, headers, recipients, content="Picture day on Friday"):
    return client.post("/notices/", json={"content": content, "recipients": recipients}, headers=headers)


def test_picture_day_is_delivered_once_per_pupil(client, classroom) -> None:
    staff, ana, ben, cleo, group_id, headers = classroom

    response = _send(client, headers[staff.id], [f"group:{group_id}", ana.id])

    assert response.status_code == 201
    assert response.json() == {"count": 2}

    inbox = client.get("/notices/", headers=headers[ana.id]).json()
    assert inbox["total"] == 1
    notice = inbox["data"][0]
    assert notice["content"] == "Picture day on Friday"
    assert notice["is_read"] is False
    assert notice["read_at"] is None
    assert notice["author"]["id"] == staff.id

    assert client.get("/notices/", headers=headers[cleo.id]).json()["total"] == 0
    sent = client.get("/notices/sent", headers=headers[staff.id]).json()
    assert {item["recipient"]["id"] for item in sent["data"]} == {ana.id, ben.id}


def test_pupil_marks_notice_read_and_unread(client, classroom) -> None:
    staff, ana, ben, _, group_id, headers = classroom
    _send(client, headers[staff.id], [f"group:{group_id}"])
    notice_id = client.get("/notices/", headers=headers[ana.id]).json()["data"][0]["id"]

    assert client.get("/notices/unread-count", headers=headers[ana.id]).json() == {"count": 1}

    read = client.patch(f"/notices/{notice_id}/read", headers=headers[ana.id])
    assert read.status_code == 200
    assert read.json()["is_read"] is True
    assert read.json()["read_at"] is not None
    assert client.patch(f"/notices/{notice_id}/read", headers=headers[ana.id]).status_code == 200
    assert client.get("/notices/unread-count", headers=headers[ana.id]).json() == {"count": 0}
    assert client.get("/notices/unread-count", headers=headers[ben.id]).json() == {"count": 1}

    unread = client.patch(f"/notices/{notice_id}/unread", headers=headers[ana.id]).json()
    assert unread["is_read"] is False
    assert unread["read_at"] is None


def test_only_the_recipient_toggles_read_state(client, classroom) -> None:
    staff, ana, ben, _, group_id, headers = classroom
    _send(client, headers[staff.id], [f"group:{group_id}"])
    notice_id = client.get("/notices/", headers=headers[ana.id]).json()["data"][0]["id"]

    assert client.patch(f"/notices/{notice_id}/read", headers=headers[ben.id]).status_code == 403
    assert client.patch(f"/notices/{notice_id}/read", headers=headers[staff.id]).status_code == 403
    assert client.patch(f"/notices/{uuid.uuid4()}/read", headers=headers[ana.id]).status_code == 404
    assert client.get(f"/notices/{notice_id}", headers=headers[ana.id]).json()["is_read"] is False
    assert client.get(f"/notices/{notice_id}", headers=headers[ben.id]).status_code == 403


def test_mark_all_read(client, classroom) -> None:
    staff, ana, _, _, group_id, headers = classroom
    _send(client, headers[staff.id], [f"group:{group_id}"])
    _send(client, headers[staff.id], [ana.id], content="Bring a coat")

    first = client.patch("/notices/mark-all-read", headers=headers[ana.id])
    second = client.patch("/notices/mark-all-read", headers=headers[ana.id])

    assert first.json() == {"count": 2}
    assert second.json() == {"count": 0}
    assert client.get("/notices/?is_read=false", headers=headers[ana.id]).json()["total"] == 0


def test_deleting_one_delivery_keeps_the_others(client, classroom) -> None:
    staff, ana, ben, _, group_id, headers = classroom
    _send(client, headers[staff.id], [f"group:{group_id}"])
    ana_notice = client.get("/notices/", headers=headers[ana.id]).json()["data"][0]["id"]

    assert client.delete(f"/notices/{ana_notice}", headers=headers[ana.id]).status_code == 403
    assert client.delete(f"/notices/{ana_notice}", headers=headers[staff.id]).status_code == 204
    assert client.get(f"/notices/{ana_notice}", headers=headers[staff.id]).status_code == 404
    assert client.get("/notices/", headers=headers[ben.id]).json()["total"] == 1


def test_rejected_notices(client, classroom) -> None:
    staff, ana, _, _, _, headers = classroom

    missing_group = _send(client, headers[staff.id], [f"group:{uuid.uuid4()}"])
    malformed = _send(client, headers[staff.id], ["not-an-id"])
    blank = _send(client, headers[staff.id], [ana.id], content="   ")
    no_recipients = _send(client, headers[staff.id], [])

    assert missing_group.status_code == 400
    assert missing_group.json()["detail"] == "No valid recipients found"
    assert malformed.status_code == 422
    assert blank.status_code == 400
    assert blank.json()["detail"] == "Content is required"
    assert no_recipients.status_code == 400
    assert no_recipients.json()["detail"] == "At least one recipient is required"
    assert client.get("/notices/sent", headers=headers[staff.id]).json()["total"] == 0


def test_recipient_ids_are_accepted_in_any_uuid_spelling(client, classroom) -> None:
    staff, ana, ben, cleo, group_id, headers = classroom

    response = _send(
        client,
        headers[staff.id],
        [ana.id.upper(), uuid.UUID(cleo.id).hex, f"group:{{{group_id.upper()}}}"],
    )

    assert response.status_code == 201
    assert response.json() == {"count": 3}
    for pupil in (ana, ben, cleo):
        assert client.get("/notices/unread-count", headers=headers[pupil.id]).json() == {"count": 1}


def test_inbox_pagination_falls_back_to_defaults(client, classroom) -> None:
    staff, ana, _, _, _, headers = classroom
    for index in range(3):
        _send(client, headers[staff.id], [ana.id], content=f"Notice {index}")

    page = client.get("/notices/?page=abc&limit=0", headers=headers[ana.id]).json()
    second = client.get("/notices/?page=2&limit=2", headers=headers[ana.id]).json()

    assert (page["page"], page["limit"], page["total"]) == (1, 10, 3)
    assert len(second["data"]) == 1
    assert second["has_prev"] is True
    assert second["has_next"] is False
    assert second["total_pages"] == 2


def test_recipient_directory_lists_users_and_groups(client, classroom) -> None:
    _, ana, _, _, group_id, headers = classroom

    directory = client.get("/notices/recipients", headers=headers[ana.id]).json()

    assert ana.id in {user["id"] for user in directory["users"]}
    assert directory["groups"] == [{"id": group_id, "name": "Class 3B"}]


def test_notices_require_authentication(client) -> None:
    assert client.get("/notices/").status_code == 401
