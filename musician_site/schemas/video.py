from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

class VideoCategory(str, Enum):
    music_video = "music_video"
    live = "live"
    interview = "interview"
    clip = "clip"
    other = "other"

class VideoBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    youtube_url: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    category: VideoCategory = "music_video"
    is_featured: bool = False
    hidden: bool = False

    class Config:
        use_enum_values = True

class VideoCreate(VideoBase):
    pass

class VideoResponse(VideoBase):
    id: int

    class Config:
        from_attributes = True
