"""
Relational storage for the site content.

One list / create / update / delete method per entity, each a thin
passthrough to the database.  Updates replace the whole record and return
``None`` when the id does not exist; deletes of unknown ids are no-ops.
Hidden rows are returned like any other; filtering them is up to callers.
"""

from typing import List, Optional

from fastapi import Depends
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from musician_site.database import get_db
from musician_site.models import (
    Album, ContentBlock, Event, Message, Photo, Press, Track, User, Video,
)


# Dialects with a native INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class DatabaseStorage:
    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def _create(self, model, data: dict):
        obj = model(**data)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def _update(self, model, obj_id: int, data: dict):
        obj = self.db.query(model).filter(model.id == obj_id).first()
        if obj is None:
            return None
        for field, value in data.items():
            setattr(obj, field, value)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def _delete(self, model, obj_id: int) -> None:
        self.db.query(model).filter(model.id == obj_id).delete(synchronize_session=False)
        self.db.commit()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, data: dict) -> User:
        return self._create(User, data)

    # ------------------------------------------------------------------
    # Content blocks
    # ------------------------------------------------------------------

    def get_content_blocks(self) -> List[ContentBlock]:
        return self.db.query(ContentBlock).all()

    def update_content_block(self, data: dict) -> ContentBlock:
        """Upsert on ``key``; an existing block only has its content replaced."""
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Content upsert is not supported on {dialect}")

        stmt = (
            insert(ContentBlock)
            .values(**data)
            .on_conflict_do_update(
                index_elements=[ContentBlock.key],
                set_={"content": data["content"]},
            )
        )
        self.db.execute(stmt)
        self.db.commit()
        return self.db.query(ContentBlock).filter(ContentBlock.key == data["key"]).one()

    # ------------------------------------------------------------------
    # Albums
    # ------------------------------------------------------------------

    def get_albums(self) -> List[Album]:
        return self.db.query(Album).order_by(Album.release_date.desc().nulls_last(), Album.id.desc()).all()

    def create_album(self, data: dict) -> Album:
        return self._create(Album, data)

    def update_album(self, album_id: int, data: dict) -> Optional[Album]:
        return self._update(Album, album_id, data)

    def delete_album(self, album_id: int) -> None:
        self._delete(Album, album_id)

    # ------------------------------------------------------------------
    # Tracks
    # ------------------------------------------------------------------

    def get_tracks(self) -> List[Track]:
        return self.db.query(Track).all()

    def get_featured_track(self) -> Optional[Track]:
        return (
            self.db.query(Track)
            .filter(Track.is_featured.is_(True), Track.hidden.isnot(True))
            .order_by(Track.id)
            .first()
        )

    def create_track(self, data: dict) -> Track:
        return self._create(Track, data)

    def update_track(self, track_id: int, data: dict) -> Optional[Track]:
        return self._update(Track, track_id, data)

    def delete_track(self, track_id: int) -> None:
        self._delete(Track, track_id)

    # ------------------------------------------------------------------
    # Videos
    # ------------------------------------------------------------------

    def get_videos(self) -> List[Video]:
        return self.db.query(Video).order_by(Video.id.desc()).all()

    def create_video(self, data: dict) -> Video:
        return self._create(Video, data)

    def update_video(self, video_id: int, data: dict) -> Optional[Video]:
        return self._update(Video, video_id, data)

    def delete_video(self, video_id: int) -> None:
        self._delete(Video, video_id)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def get_events(self) -> List[Event]:
        return self.db.query(Event).order_by(Event.date.asc(), Event.id).all()

    def create_event(self, data: dict) -> Event:
        return self._create(Event, data)

    def update_event(self, event_id: int, data: dict) -> Optional[Event]:
        return self._update(Event, event_id, data)

    def delete_event(self, event_id: int) -> None:
        self._delete(Event, event_id)

    # ------------------------------------------------------------------
    # Press
    # ------------------------------------------------------------------

    def get_press(self) -> List[Press]:
        return self.db.query(Press).order_by(Press.date.desc().nulls_last(), Press.id.desc()).all()

    def create_press(self, data: dict) -> Press:
        return self._create(Press, data)

    def update_press(self, press_id: int, data: dict) -> Optional[Press]:
        return self._update(Press, press_id, data)

    def delete_press(self, press_id: int) -> None:
        self._delete(Press, press_id)

    # ------------------------------------------------------------------
    # Photos
    # ------------------------------------------------------------------

    def get_photos(self) -> List[Photo]:
        return self.db.query(Photo).order_by(Photo.display_order.asc(), Photo.id).all()

    def create_photo(self, data: dict) -> Photo:
        return self._create(Photo, data)

    def update_photo(self, photo_id: int, data: dict) -> Optional[Photo]:
        return self._update(Photo, photo_id, data)

    def delete_photo(self, photo_id: int) -> None:
        self._delete(Photo, photo_id)

    def reorder_photo(self, photo_id: int, direction: str) -> Optional[List[Photo]]:
        """
        Swap a photo with its neighbour in gallery order.

        Returns the reordered gallery, or None if the photo does not exist.
        Moving past either end leaves the order unchanged.
        """
        photos = self.get_photos()
        index = next((i for i, p in enumerate(photos) if p.id == photo_id), None)
        if index is None:
            return None

        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(photos):
            return photos

        # Ties would make a swap invisible, so renumber first
        orders = [p.display_order or 0 for p in photos]
        if len(set(orders)) != len(orders):
            for position, photo in enumerate(photos):
                photo.display_order = position

        current, neighbour = photos[index], photos[target]
        current.display_order, neighbour.display_order = neighbour.display_order, current.display_order
        self.db.commit()
        return self.get_photos()

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def get_messages(self) -> List[Message]:
        return self.db.query(Message).order_by(Message.created_at.desc(), Message.id.desc()).all()

    def create_message(self, data: dict) -> Message:
        return self._create(Message, data)

    def mark_message_read(self, message_id: int) -> Optional[Message]:
        return self._update(Message, message_id, {"read": True})


def get_storage(db: Session = Depends(get_db)) -> DatabaseStorage:
    return DatabaseStorage(db)
