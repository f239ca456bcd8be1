from sqlalchemy import Column, String, Text, Boolean, DateTime
from sqlalchemy.orm import relationship
from musician_site.models.base import IdentityModel

class Album(IdentityModel):
    __tablename__ = "albums"

    title = Column(String(200), nullable=False)
    cover_image = Column(String(500), nullable=False)
    release_date = Column(DateTime, nullable=True)
    spotify_url = Column(String(500))
    apple_music_url = Column(String(500))
    description = Column(Text)
    hidden = Column(Boolean, default=False)

    tracks = relationship("Track", back_populates="album")
