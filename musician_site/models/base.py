from sqlalchemy import Column, Integer
from musician_site.database import Base

class IdentityModel(Base):
    """Surrogate integer identity assigned by the database."""
    __abstract__ = True
    id = Column(Integer, primary_key=True, index=True)
