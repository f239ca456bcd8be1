"""
Server-side session store.

Sessions live in process memory and map an opaque session id to the
logged-in user.  The id travels to the browser inside a signed token
(see ``musician_site.core.security``); destroying the entry here is what
makes logout effective even while the token itself is still valid.
"""

import secrets
import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SessionData:
    user_id: int
    expires_at: float


class SessionStore:
    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def create(self, user_id: int) -> str:
        """Open a session for ``user_id`` and return its id."""
        self.purge_expired()
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[session_id] = SessionData(
                user_id=user_id,
                expires_at=time.time() + self.ttl_seconds,
            )
        return session_id

    def get(self, session_id: str) -> Optional[SessionData]:
        """Return the live session, dropping it if it has expired."""
        with self._lock:
            data = self._sessions.get(session_id)
            if data is None:
                return None
            if data.expires_at <= time.time():
                del self._sessions[session_id]
                return None
            return data

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def purge_expired(self) -> int:
        now = time.time()
        with self._lock:
            expired = [sid for sid, data in self._sessions.items() if data.expires_at <= now]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
