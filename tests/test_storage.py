"""
DatabaseStorage used directly, without the HTTP layer.
"""

from datetime import datetime

import pytest

from musician_site.database import SessionLocal
from musician_site.services.storage import DatabaseStorage


@pytest.fixture
def storage(db):
    return DatabaseStorage(db)


def test_create_assigns_identity(storage):
    album = storage.create_album({"title": "A", "cover_image": "/uploads/a"})
    assert album.id is not None
    assert album.hidden is False
    assert [a.id for a in storage.get_albums()] == [album.id]


def test_update_missing_id_returns_none(storage):
    assert storage.update_album(404, {"title": "A", "cover_image": "/uploads/a"}) is None
    assert storage.update_track(404, {"title": "T", "audio_url": "/u"}) is None


def test_delete_missing_id_is_noop(storage):
    storage.delete_event(404)
    storage.delete_photo(404)
    assert storage.get_events() == []


def test_hidden_rows_are_returned(storage):
    storage.create_video({"title": "V", "youtube_url": "https://y", "hidden": True})
    assert len(storage.get_videos()) == 1


def test_content_block_upsert(storage):
    storage.update_content_block({"key": "bio_en", "content": "one", "section": "about"})
    storage.update_content_block({"key": "bio_en", "content": "two", "section": "about"})
    blocks = storage.get_content_blocks()
    assert len(blocks) == 1
    assert blocks[0].content == "two"


def test_content_block_upsert_when_key_appears_concurrently():
    first, second = SessionLocal(), SessionLocal()
    try:
        ours, theirs = DatabaseStorage(first), DatabaseStorage(second)
        # Both writers start before the key exists
        assert ours.get_content_blocks() == []
        theirs.update_content_block({"key": "bio_en", "content": "theirs", "section": "about"})

        block = ours.update_content_block({"key": "bio_en", "content": "ours", "section": "home"})

        assert block.content == "ours"
        assert block.section == "about"
        second.expire_all()
        assert [(b.key, b.content) for b in theirs.get_content_blocks()] == [("bio_en", "ours")]
    finally:
        first.close()
        second.close()


def test_undated_albums_sort_last(storage):
    storage.create_album({"title": "Undated", "cover_image": "/u/1"})
    storage.create_album({"title": "Old", "cover_image": "/u/2", "release_date": datetime(2010, 1, 1)})
    storage.create_album({"title": "New", "cover_image": "/u/3", "release_date": datetime(2020, 1, 1)})
    assert [a.title for a in storage.get_albums()] == ["New", "Old", "Undated"]


def test_events_ascending(storage):
    for day in (20, 5, 12):
        storage.create_event({"title": f"d{day}", "date": datetime(2026, 5, day), "location": "X"})
    assert [e.title for e in storage.get_events()] == ["d5", "d12", "d20"]


def test_user_lookup(storage):
    user = storage.create_user({"username": "editor", "password": "hash", "role": "admin"})
    assert storage.get_user(user.id).username == "editor"
    assert storage.get_user_by_username("editor").id == user.id
    assert storage.get_user_by_username("nobody") is None


def test_messages_newest_first(storage):
    first = storage.create_message({"name": "A", "email": "a@example.com", "message": "1"})
    second = storage.create_message({"name": "B", "email": "b@example.com", "message": "2"})
    assert [m.id for m in storage.get_messages()] == [second.id, first.id]
    assert storage.mark_message_read(first.id).read is True
    assert storage.mark_message_read(999) is None
