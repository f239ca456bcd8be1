from sqlalchemy import Column, String, Boolean
from musician_site.models.base import IdentityModel

class Video(IdentityModel):
    __tablename__ = "videos"

    title = Column(String(200), nullable=False)
    youtube_url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500))
    category = Column(String(20), default="music_video")
    is_featured = Column(Boolean, default=False)
    hidden = Column(Boolean, default=False)
