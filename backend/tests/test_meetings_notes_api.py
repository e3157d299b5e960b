import pytest


@pytest.fixture
def members(register_user, create_group):
    """alice owns a group; bob is a stranger to it."""
    alice_user, alice = register_user("alice")
    _, bob = register_user("bob")
    group = create_group(alice)
    return {"alice": alice, "alice_id": alice_user["id"], "bob": bob, "group": group}


def _meeting(group_id, **overrides):
    payload = {"title": "Weekly sync", "date": "2024-05-01", "time": "18:00", "groupId": group_id}
    payload.update(overrides)
    return payload


def _note(group_id, **overrides):
    payload = {"title": "Lecture 1", "fileType": "pdf", "groupId": group_id, "fileUrl": "https://files.example/l1.pdf"}
    payload.update(overrides)
    return payload


def test_create_meeting_stamps_creator(client, members):
    response = client.post("/api/meetings", json=_meeting(members["group"]["id"]), headers=members["alice"])

    assert response.status_code == 201
    meeting = response.json()
    assert meeting["createdBy"] == members["alice_id"]
    assert meeting["date"] == "2024-05-01"
    assert meeting["time"] == "18:00"
    assert meeting["id"] == 1


def test_create_meeting_forbidden_for_non_member(client, members):
    response = client.post("/api/meetings", json=_meeting(members["group"]["id"]), headers=members["bob"])
    assert response.status_code == 403
    assert response.json()["detail"] == "You must be a member of the group to schedule a meeting"
    assert client.get("/api/meetings", headers=members["bob"]).json() == []


def test_create_meeting_in_unknown_group_is_forbidden(client, members):
    response = client.post("/api/meetings", json=_meeting(99), headers=members["alice"])
    assert response.status_code == 403


@pytest.mark.parametrize("field", ["title", "date", "time", "groupId"])
def test_create_meeting_validation(client, members, field):
    payload = _meeting(members["group"]["id"])
    del payload[field]

    response = client.post("/api/meetings", json=payload, headers=members["alice"])

    assert response.status_code == 400
    assert field in [error["field"] for error in response.json()["detail"]]
    assert client.get("/api/meetings", headers=members["alice"]).json() == []


def test_list_meetings_is_visible_to_everyone(client, members, create_group):
    other = create_group(members["alice"], name="Geometry", description="Triangles and circles")
    client.post("/api/meetings", json=_meeting(members["group"]["id"], title="First"), headers=members["alice"])
    client.post("/api/meetings", json=_meeting(other["id"], title="Second"), headers=members["alice"])

    everything = client.get("/api/meetings", headers=members["bob"]).json()
    assert [m["title"] for m in everything] == ["First", "Second"]

    filtered = client.get("/api/meetings", params={"groupId": other["id"]}, headers=members["bob"]).json()
    assert [m["title"] for m in filtered] == ["Second"]


def test_create_note_stamps_uploader(client, members):
    response = client.post("/api/notes", json=_note(members["group"]["id"]), headers=members["alice"])

    assert response.status_code == 201
    note = response.json()
    assert note["uploadedBy"] == members["alice_id"]
    assert note["fileType"] == "pdf"
    assert note["fileUrl"] == "https://files.example/l1.pdf"
    assert note["uploadedAt"]


def test_create_note_forbidden_for_non_member(client, members):
    response = client.post("/api/notes", json=_note(members["group"]["id"]), headers=members["bob"])
    assert response.status_code == 403
    assert response.json()["detail"] == "You must be a member of the group to upload notes"


@pytest.mark.parametrize("overrides", [{"title": "x"}, {"fileType": ""}, {"fileUrl": ""}, {"groupId": "abc"}])
def test_create_note_validation(client, members, overrides):
    response = client.post("/api/notes", json=_note(members["group"]["id"], **overrides), headers=members["alice"])
    assert response.status_code == 400
    assert client.get("/api/notes", headers=members["alice"]).json() == []


def test_list_notes(client, members):
    client.post("/api/notes", json=_note(members["group"]["id"], title="Lecture 1"), headers=members["alice"])
    client.post("/api/notes", json=_note(members["group"]["id"], title="Lecture 2"), headers=members["alice"])

    notes = client.get("/api/notes", headers=members["bob"]).json()
    assert [n["title"] for n in notes] == ["Lecture 1", "Lecture 2"]
    assert client.get("/api/notes", params={"groupId": 99}, headers=members["bob"]).json() == []


@pytest.mark.parametrize("path, payload", [("/api/meetings", _meeting), ("/api/notes", _note)])
def test_create_rejects_group_id_out_of_store_range(client, members, path, payload):
    response = client.post(path, json=payload(2**70), headers=members["alice"])

    assert response.status_code == 400
    assert "groupId" in [error["field"] for error in response.json()["detail"]]
    assert client.get(path, headers=members["alice"]).json() == []


@pytest.mark.parametrize("path", ["/api/meetings", "/api/notes"])
def test_list_filter_rejects_group_id_out_of_store_range(client, members, path):
    response = client.get(path, params={"groupId": -(2**64)}, headers=members["alice"])
    assert response.status_code == 400
