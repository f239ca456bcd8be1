from pydantic import BaseModel, Field
from typing import Optional

class PhotoBase(BaseModel):
    image_url: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    category: Optional[str] = "concert"
    display_order: int = 0
    hidden: bool = False

class PhotoCreate(PhotoBase):
    pass

class PhotoReorder(BaseModel):
    id: int
    direction: str = Field(..., pattern="^(up|down)$")

class PhotoResponse(PhotoBase):
    id: int

    class Config:
        from_attributes = True
