from sqlalchemy import Column, String, Integer, Boolean
from musician_site.models.base import IdentityModel

class Photo(IdentityModel):
    __tablename__ = "photos"

    image_url = Column(String(500), nullable=False)
    title = Column(String(200), nullable=False)
    category = Column(String(50), default="concert")
    display_order = Column(Integer, default=0)
    hidden = Column(Boolean, default=False)
