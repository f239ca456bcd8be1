from sqlalchemy import Column, String, Text, Boolean, DateTime, func
from musician_site.models.base import IdentityModel

class Message(IdentityModel):
    __tablename__ = "messages"

    name = Column(String(150), nullable=False)
    email = Column(String(150), nullable=False)
    subject = Column(String(200))
    message = Column(Text, nullable=False)
    read = Column(Boolean, default=False)
    created_at = Column(DateTime, server_default=func.now())
