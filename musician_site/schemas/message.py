from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

class MessageCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., min_length=1)

class MessageResponse(MessageCreate):
    id: int
    read: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
