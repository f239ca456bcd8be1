from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.album import AlbumCreate, AlbumResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[AlbumResponse])
def list_albums(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    """Albums, newest release first."""
    albums = storage.get_albums()
    return filter_hidden(albums, include_hidden_rows(current_user, include_hidden))

@router.post("", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_album(payload: AlbumCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_album(payload.dict())

# PATCH carries a full record: fields left out fall back to their defaults
@router.patch("/{album_id}", response_model=AlbumResponse, dependencies=[Depends(get_current_user)])
def update_album(album_id: int, payload: AlbumCreate, storage: DatabaseStorage = Depends(get_storage)):
    album = storage.update_album(album_id, payload.dict())
    if album is None:
        raise NotFoundException("Album not found")
    return album

@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_album(album_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_album(album_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
