from sqlalchemy import Column, String, Text, Boolean, DateTime
from musician_site.models.base import IdentityModel

class Press(IdentityModel):
    __tablename__ = "press"

    title = Column(String(300), nullable=False)
    source = Column(String(200), nullable=False)
    url = Column(String(500), nullable=False)
    snippet = Column(Text)
    date = Column(DateTime, nullable=True)
    hidden = Column(Boolean, default=False)
