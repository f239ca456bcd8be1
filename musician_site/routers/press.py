from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.press import PressCreate, PressResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[PressResponse])
def list_press(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    """Press coverage, most recent first."""
    items = storage.get_press()
    return filter_hidden(items, include_hidden_rows(current_user, include_hidden))

@router.post("", response_model=PressResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_press(payload: PressCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_press(payload.dict())

@router.patch("/{press_id}", response_model=PressResponse, dependencies=[Depends(get_current_user)])
def update_press(press_id: int, payload: PressCreate, storage: DatabaseStorage = Depends(get_storage)):
    item = storage.update_press(press_id, payload.dict())
    if item is None:
        raise NotFoundException("Press article not found")
    return item

@router.delete("/{press_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_press(press_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_press(press_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
