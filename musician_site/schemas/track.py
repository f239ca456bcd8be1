from pydantic import BaseModel, Field
from typing import Optional

class TrackBase(BaseModel):
    album_id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=200)
    audio_url: str = Field(..., min_length=1)
    photo_url: Optional[str] = None
    duration: Optional[str] = Field(None, max_length=20)
    is_single: bool = False
    is_featured: bool = False
    hidden: bool = False

class TrackCreate(TrackBase):
    pass

class TrackResponse(TrackBase):
    id: int

    class Config:
        from_attributes = True
