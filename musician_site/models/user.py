from sqlalchemy import Column, String, DateTime, func
from musician_site.models.base import IdentityModel

class User(IdentityModel):
    __tablename__ = "users"

    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(String(20), nullable=False, default="admin")
    created_at = Column(DateTime, server_default=func.now())
