from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from musician_site.models.base import IdentityModel

class Track(IdentityModel):
    __tablename__ = "tracks"

    album_id = Column(Integer, ForeignKey("albums.id"), nullable=True)
    title = Column(String(200), nullable=False)
    audio_url = Column(String(500), nullable=False)
    photo_url = Column(String(500))
    duration = Column(String(20))  # display string, e.g. "3:42"
    is_single = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    hidden = Column(Boolean, default=False)

    album = relationship("Album", back_populates="tracks")
