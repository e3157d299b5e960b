from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from studyhub.models.base import GroupMember, Meeting, Message, Note, StudyGroup
from studyhub.repositories.auth_repository import create_user, get_all_users, get_user_by_id, get_user_by_username
from studyhub.repositories.group_repository import (
    add_member_to_group_db,
    create_group_db,
    create_group_with_creator_db,
    get_all_groups_db,
    get_group_by_id_db,
    get_group_members_db,
    get_user_groups_db,
    join_group_db,
)
from studyhub.repositories.meeting_repository import (
    create_meeting_db,
    get_meeting_by_id_db,
    get_meetings_by_group_db,
    get_meetings_db,
)
from studyhub.repositories.message_repository import (
    create_message_db,
    get_message_by_id_db,
    get_messages_by_group_db,
)
from studyhub.repositories.note_repository import create_note_db, get_note_by_id_db, get_notes_by_group_db


def _group(name="Physics", created_by=1):
    return StudyGroup(name=name, description="Mechanics and waves", created_by=created_by)


def test_ids_start_at_one_and_are_counted_per_kind(store):
    user = create_user(store, "ada", "hash", "Ada")
    group = create_group_db(store, _group(created_by=user.id))
    second_group = create_group_db(store, _group("Chemistry", user.id))
    message = create_message_db(store, "hello", group.id, user.id)

    assert user.id == 1
    assert (group.id, second_group.id) == (1, 2)
    assert message.id == 1


def test_create_stamps_server_fields(store):
    group = create_group_db(store, _group())
    assert group.is_active is True
    assert group.created_at is not None

    member = add_member_to_group_db(store, GroupMember(group_id=group.id, user_id=5))
    assert member.joined_at is not None

    note = create_note_db(store, Note(title="Ch. 1", file_type="pdf", group_id=group.id, uploaded_by=5, file_url="https://x/1.pdf"))
    assert note.uploaded_at is not None


def test_get_by_id_returns_none_for_unknown_ids(store):
    assert get_user_by_id(store, 42) is None
    assert get_user_by_username(store, "nobody") is None
    assert get_group_by_id_db(store, 42) is None
    assert get_meeting_by_id_db(store, 42) is None
    assert get_note_by_id_db(store, 42) is None
    assert get_message_by_id_db(store, 42) is None


def test_ids_are_never_reused(store):
    first = create_message_db(store, "one", 1, 1)
    with store.session() as db:
        db.query(Message).filter(Message.id == first.id).delete()

    second = create_message_db(store, "two", 1, 1)
    assert second.id == first.id + 1


def test_duplicate_username_is_rejected(store):
    assert create_user(store, "ada", "hash", "Ada") is not None
    assert create_user(store, "ada", "other", "Ada Again") is None


def test_list_all_keeps_insertion_order(store):
    for name in ("B group", "A group", "C group"):
        create_group_db(store, _group(name))
    assert [g.name for g in get_all_groups_db(store)] == ["B group", "A group", "C group"]

    for title in ("Kickoff", "Review"):
        create_meeting_db(store, Meeting(title=title, date="2024-05-01", time="10:00", group_id=1, created_by=1))
    create_meeting_db(store, Meeting(title="Other", date="2024-05-02", time="11:00", group_id=2, created_by=1))
    assert [m.title for m in get_meetings_db(store)] == ["Kickoff", "Review", "Other"]
    assert [m.title for m in get_meetings_by_group_db(store, 1)] == ["Kickoff", "Review"]
    assert get_notes_by_group_db(store, 1) == []


def test_messages_are_ordered_by_sent_time(store):
    now = datetime.now(timezone.utc)
    with store.session() as db:
        db.add(Message(content="third", group_id=1, user_id=1, sent_at=now))
        db.add(Message(content="first", group_id=1, user_id=1, sent_at=now - timedelta(minutes=2)))
        db.add(Message(content="other group", group_id=2, user_id=1, sent_at=now))
        db.add(Message(content="second", group_id=1, user_id=1, sent_at=now - timedelta(minutes=1)))

    contents = [m.content for m in get_messages_by_group_db(store, 1)]
    assert contents == ["first", "second", "third"]
    assert [m.content for m in get_messages_by_group_db(store, 1)] == contents


def test_group_creation_adds_creator_membership(store):
    group = create_group_with_creator_db(store, _group(created_by=3))
    members = get_group_members_db(store, group.id)
    assert [(m.group_id, m.user_id) for m in members] == [(group.id, 3)]


def test_user_groups_include_created_and_joined(store):
    created_only = create_group_db(store, _group("Created", created_by=7))
    joined = create_group_db(store, _group("Joined", created_by=1))
    create_group_db(store, _group("Unrelated", created_by=1))
    add_member_to_group_db(store, GroupMember(group_id=joined.id, user_id=7))

    assert [g.id for g in get_user_groups_db(store, 7)] == [created_only.id, joined.id]


def test_join_is_idempotent(store):
    group = create_group_db(store, _group())
    assert join_group_db(store, group.id, 9) is not None
    assert join_group_db(store, group.id, 9) is None
    assert len(get_group_members_db(store, group.id)) == 1


def test_concurrent_joins_create_one_membership(store):
    group = create_group_db(store, _group())
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: join_group_db(store, group.id, 4), range(16)))

    assert sum(r is not None for r in results) == 1
    assert len(get_group_members_db(store, group.id)) == 1


def test_users_listed_in_creation_order(store):
    for username in ("zoe", "adam", "mia"):
        create_user(store, username, "hash", username.title())
    assert [u.username for u in get_all_users(store)] == ["zoe", "adam", "mia"]
