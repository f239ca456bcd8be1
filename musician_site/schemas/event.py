from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime
from enum import Enum

class EventType(str, Enum):
    concert = "concert"
    festival = "festival"

def coerce_timestamp(value):
    """Accept epoch milliseconds as well as the ISO strings pydantic already parses."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.utcfromtimestamp(value / 1000)
    return value

class EventBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    date: datetime
    location: str = Field(..., min_length=1, max_length=200)
    venue: Optional[str] = None
    ticket_url: Optional[str] = None
    type: EventType = "concert"
    hidden: bool = False

    class Config:
        use_enum_values = True

class EventCreate(EventBase):

    @validator("date", pre=True)
    def coerce_date(cls, v):
        return coerce_timestamp(v)

class EventResponse(EventBase):
    id: int

    class Config:
        from_attributes = True
