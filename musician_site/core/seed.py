"""
First-boot data: the admin account and, optionally, demo content so a
fresh install has something to render.
"""

from datetime import datetime

from loguru import logger
from sqlalchemy.orm import Session

from musician_site.config import settings
from musician_site.core.security import get_password_hash
from musician_site.services.storage import DatabaseStorage

DEMO_CONTENT_BLOCKS = [
    {"key": "hero_title_en", "content": "New album out now", "section": "home"},
    {"key": "hero_title_fr", "content": "Nouvel album disponible", "section": "home"},
    {"key": "bio_en", "content": "Singer, songwriter and performer.", "section": "about"},
    {"key": "bio_fr", "content": "Chanteur, auteur-compositeur et interprète.", "section": "about"},
    {"key": "contact_email", "content": "booking@example.com", "section": "contact"},
]


def seed_admin(storage: DatabaseStorage) -> bool:
    """Create the configured admin account if it is missing. Returns True when created."""
    if storage.get_user_by_username(settings.ADMIN_USERNAME):
        return False
    storage.create_user({
        "username": settings.ADMIN_USERNAME,
        "password": get_password_hash(settings.ADMIN_PASSWORD),
        "role": "admin",
    })
    logger.info(f"Created admin user '{settings.ADMIN_USERNAME}'")
    return True


def seed_demo_content(storage: DatabaseStorage) -> bool:
    if storage.get_albums():
        return False

    for block in DEMO_CONTENT_BLOCKS:
        storage.update_content_block(block)

    album = storage.create_album({
        "title": "Sissan",
        "cover_image": "/uploads/demo-cover",
        "release_date": datetime(2022, 2, 25),
        "description": "Debut solo EP.",
    })
    storage.create_track({
        "album_id": album.id,
        "title": "Tounganata",
        "audio_url": "/uploads/demo-track",
        "duration": "4:12",
        "is_single": True,
        "is_featured": True,
    })
    storage.create_video({
        "title": "Tounganata (Official Video)",
        "youtube_url": "https://www.youtube.com/watch?v=A_0uXmK8IuE",
        "thumbnail_url": "https://img.youtube.com/vi/A_0uXmK8IuE/hqdefault.jpg",
        "category": "music_video",
        "is_featured": True,
    })
    storage.create_event({
        "title": "Album release concert",
        "date": datetime(2026, 12, 12, 20, 0),
        "location": "Ouagadougou",
        "venue": "Institut Français",
        "type": "concert",
    })
    storage.create_press({
        "title": "A year of revelations",
        "source": "Infos Culture du Faso",
        "url": "https://www.infosculturedufaso.net/",
        "snippet": "Looking back on a year of releases and awards.",
        "date": datetime(2025, 1, 14),
    })
    logger.info("Inserted demo content")
    return True


def seed_database(db: Session) -> None:
    storage = DatabaseStorage(db)
    seed_admin(storage)
    if settings.SEED_DEMO_CONTENT:
        seed_demo_content(storage)
