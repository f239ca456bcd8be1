from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.track import TrackCreate, TrackResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[TrackResponse])
def list_tracks(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    tracks = storage.get_tracks()
    return filter_hidden(tracks, include_hidden_rows(current_user, include_hidden))

@router.get("/featured", response_model=TrackResponse)
def featured_track(storage: DatabaseStorage = Depends(get_storage)):
    """The track highlighted on the home page."""
    track = storage.get_featured_track()
    if track is None:
        raise NotFoundException("No featured track")
    return track

@router.post("", response_model=TrackResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_track(payload: TrackCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_track(payload.dict())

@router.patch("/{track_id}", response_model=TrackResponse, dependencies=[Depends(get_current_user)])
def update_track(track_id: int, payload: TrackCreate, storage: DatabaseStorage = Depends(get_storage)):
    track = storage.update_track(track_id, payload.dict())
    if track is None:
        raise NotFoundException("Track not found")
    return track

@router.delete("/{track_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_track(track_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_track(track_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
