from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class AlbumBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    cover_image: str = Field(..., min_length=1)
    release_date: Optional[datetime] = None
    spotify_url: Optional[str] = None
    apple_music_url: Optional[str] = None
    description: Optional[str] = None
    hidden: bool = False

class AlbumCreate(AlbumBase):
    pass

class AlbumResponse(AlbumBase):
    id: int

    class Config:
        from_attributes = True
