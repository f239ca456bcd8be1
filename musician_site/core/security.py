from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request, Response
from loguru import logger
from sqlalchemy.orm import Session

from musician_site.config import settings
from musician_site.core.exceptions import AuthException
from musician_site.core.sessions import SessionStore
from musician_site.database import get_db
from musician_site.models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

_session_store: Optional[SessionStore] = None

def get_session_store() -> SessionStore:
    """Process-wide session store, created on first use."""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore(ttl_seconds=settings.SESSION_EXPIRE_MINUTES * 60)
    return _session_store

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_session_token(session_id: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    return jwt.encode({"sid": session_id, "exp": expire}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_token(token: str) -> Optional[str]:
    """Return the session id carried by a cookie token, or None if it is forged or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")

def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        path="/",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")

def get_session_id(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return verify_token(token)

def get_current_user_optional(
    request: Request,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> Optional[User]:
    """
    Resolve the session cookie to a user, or None for anonymous visitors.
    Useful for public endpoints that behave differently for the admin.
    """
    session_id = get_session_id(request)
    if session_id is None:
        return None
    session = store.get(session_id)
    if session is None:
        return None
    return db.query(User).filter(User.id == session.user_id).first()

def get_current_user(user: Optional[User] = Depends(get_current_user_optional)) -> User:
    """Route guard for admin endpoints; missing and expired sessions look the same."""
    if user is None:
        raise AuthException("Unauthorized")
    return user

def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for '{username}'")
        return None
    return user
