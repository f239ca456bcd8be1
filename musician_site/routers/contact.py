from fastapi import APIRouter, Depends, status
from typing import List

from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user
from musician_site.schemas.message import MessageCreate, MessageResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(payload: MessageCreate, storage: DatabaseStorage = Depends(get_storage)):
    """Public contact form; no session required."""
    return storage.create_message(payload.dict())

@router.get("", response_model=List[MessageResponse], dependencies=[Depends(get_current_user)])
def list_messages(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_messages()

@router.patch("/{message_id}/read", response_model=MessageResponse, dependencies=[Depends(get_current_user)])
def mark_read(message_id: int, storage: DatabaseStorage = Depends(get_storage)):
    message = storage.mark_message_read(message_id)
    if message is None:
        raise NotFoundException("Message not found")
    return message
