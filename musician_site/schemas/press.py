from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime

from musician_site.schemas.event import coerce_timestamp

class PressBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    source: str = Field(..., min_length=1, max_length=200)
    url: str = Field(..., min_length=1)
    snippet: Optional[str] = None
    date: Optional[datetime] = None
    hidden: bool = False

class PressCreate(PressBase):
    # An article without a date is stamped with the time it was recorded
    date: datetime = Field(default_factory=datetime.utcnow)

    @validator("date", pre=True)
    def coerce_date(cls, v):
        if v is None or v == "":
            return datetime.utcnow()
        return coerce_timestamp(v)

class PressResponse(PressBase):
    id: int

    class Config:
        from_attributes = True
