from fastapi import APIRouter, Depends, Request, Response
from loguru import logger
from sqlalchemy.orm import Session

from musician_site.core.exceptions import AuthException
from musician_site.core.security import (
    authenticate,
    clear_session_cookie,
    create_session_token,
    get_current_user,
    get_session_id,
    get_session_store,
    set_session_cookie,
)
from musician_site.core.sessions import SessionStore
from musician_site.database import get_db
from musician_site.models.user import User
from musician_site.schemas.auth import Login, StatusMessage
from musician_site.schemas.user import UserResponse

router = APIRouter()

@router.post("/login", response_model=UserResponse)
def login(
    credentials: Login,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    user = authenticate(db, credentials.username, credentials.password)
    if user is None:
        raise AuthException("Invalid username or password")

    session_id = store.create(user.id)
    set_session_cookie(response, create_session_token(session_id))
    logger.info(f"User '{user.username}' logged in")
    return user

@router.post("/logout", response_model=StatusMessage)
def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    session_id = get_session_id(request)
    if session_id is not None:
        store.destroy(session_id)
    clear_session_cookie(response)
    return {"message": "Logged out"}

@router.get("/user", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
