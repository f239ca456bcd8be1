from sqlalchemy import Column, String, Boolean, DateTime
from musician_site.models.base import IdentityModel

class Event(IdentityModel):
    __tablename__ = "events"

    title = Column(String(200), nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    location = Column(String(200), nullable=False)
    venue = Column(String(200))
    ticket_url = Column(String(500))
    type = Column(String(20), default="concert")  # concert, festival
    hidden = Column(Boolean, default=False)
