from sqlalchemy import Column, String, Text
from musician_site.models.base import IdentityModel

class ContentBlock(IdentityModel):
    __tablename__ = "content_blocks"

    # e.g. 'bio_en', 'bio_fr', 'hero_title_en'
    key = Column(String(100), unique=True, nullable=False, index=True)
    content = Column(Text, nullable=False)
    section = Column(String(50), nullable=False)  # home, about, contact
