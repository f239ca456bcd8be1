from pydantic import BaseModel, Field

class ContentBlockCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=100)
    content: str
    section: str = Field(..., min_length=1, max_length=50)

class ContentBlockResponse(ContentBlockCreate):
    id: int

    class Config:
        from_attributes = True
