from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.event import EventCreate, EventResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[EventResponse])
def list_events(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    """Tour dates in chronological order."""
    events = storage.get_events()
    return filter_hidden(events, include_hidden_rows(current_user, include_hidden))

@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_event(payload: EventCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_event(payload.dict())

@router.patch("/{event_id}", response_model=EventResponse, dependencies=[Depends(get_current_user)])
def update_event(event_id: int, payload: EventCreate, storage: DatabaseStorage = Depends(get_storage)):
    event = storage.update_event(event_id, payload.dict())
    if event is None:
        raise NotFoundException("Event not found")
    return event

@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_event(event_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
