from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.photo import PhotoCreate, PhotoReorder, PhotoResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[PhotoResponse])
def list_photos(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    """Gallery photos by ascending display order."""
    photos = storage.get_photos()
    return filter_hidden(photos, include_hidden_rows(current_user, include_hidden))

@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_photo(payload: PhotoCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_photo(payload.dict())

@router.post("/reorder", response_model=List[PhotoResponse], dependencies=[Depends(get_current_user)])
def reorder_photo(payload: PhotoReorder, storage: DatabaseStorage = Depends(get_storage)):
    photos = storage.reorder_photo(payload.id, payload.direction)
    if photos is None:
        raise NotFoundException("Photo not found")
    return photos

@router.patch("/{photo_id}", response_model=PhotoResponse, dependencies=[Depends(get_current_user)])
def update_photo(photo_id: int, payload: PhotoCreate, storage: DatabaseStorage = Depends(get_storage)):
    photo = storage.update_photo(photo_id, payload.dict())
    if photo is None:
        raise NotFoundException("Photo not found")
    return photo

@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_photo(photo_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_photo(photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
