from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from musician_site.core.core import filter_hidden, include_hidden_rows
from musician_site.core.exceptions import NotFoundException
from musician_site.core.security import get_current_user, get_current_user_optional
from musician_site.models.user import User
from musician_site.schemas.video import VideoCreate, VideoResponse
from musician_site.services.storage import DatabaseStorage, get_storage

router = APIRouter()

@router.get("", response_model=List[VideoResponse])
def list_videos(
    include_hidden: bool = Query(False, alias="includeHidden"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    storage: DatabaseStorage = Depends(get_storage),
):
    videos = storage.get_videos()
    return filter_hidden(videos, include_hidden_rows(current_user, include_hidden))

@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_video(payload: VideoCreate, storage: DatabaseStorage = Depends(get_storage)):
    return storage.create_video(payload.dict())

@router.patch("/{video_id}", response_model=VideoResponse, dependencies=[Depends(get_current_user)])
def update_video(video_id: int, payload: VideoCreate, storage: DatabaseStorage = Depends(get_storage)):
    video = storage.update_video(video_id, payload.dict())
    if video is None:
        raise NotFoundException("Video not found")
    return video

@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_video(video_id: int, storage: DatabaseStorage = Depends(get_storage)):
    storage.delete_video(video_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
