from fastapi import APIRouter, Depends
from typing import List

from musician_site.core.security import get_current_user
from musician_site.schemas.content import ContentBlockCreate, ContentBlockResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[ContentBlockResponse])
def list_content(storage: DatabaseStorage = Depends(get_storage)):
    """Every editable text fragment of the site."""
    return storage.get_content_blocks()

@router.post("", response_model=ContentBlockResponse, dependencies=[Depends(get_current_user)])
def update_content(block: ContentBlockCreate, storage: DatabaseStorage = Depends(get_storage)):
    """Create the block, or replace its content if the key already exists."""
    return storage.update_content_block(block.dict())
