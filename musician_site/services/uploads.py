# musician_site/services/uploads.py
import os
import threading
import time
import uuid
from pathlib import Path
from typing import AsyncIterator, Dict, Optional

import aiofiles
from fastapi import HTTPException, status
from loguru import logger

from musician_site.config import settings

PUBLIC_PREFIX = "/uploads"


class LocalUploadStorage:
    """
    Two-step upload handshake backed by a local directory.

    ``mint`` hands out a random file id together with the URL the client
    must PUT the bytes to; ``claim`` accepts each minted id exactly once,
    and ``write_stream`` then copies the request body to disk under that
    id.  Files are served back under ``/uploads/{id}``.
    """

    def __init__(self, uploads_dir: str, ttl_seconds: int):
        self.uploads_dir = Path(uploads_dir)
        self.ttl_seconds = ttl_seconds
        # file id -> expiry of the upload URL
        self._pending: Dict[str, float] = {}
        self._lock = threading.Lock()

    def ensure_dir(self) -> None:
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def mint(self, base_url: str) -> dict:
        file_id = str(uuid.uuid4())
        now = time.time()
        with self._lock:
            for pending_id in [fid for fid, exp in self._pending.items() if exp <= now]:
                del self._pending[pending_id]
            self._pending[file_id] = now + self.ttl_seconds
        return {
            "file_id": file_id,
            "upload_url": f"{base_url.rstrip('/')}/api/uploads/{file_id}",
            "object_path": self.public_path(file_id),
        }

    def claim(self, file_id: str) -> None:
        """
        Consume a minted id.  Ids that were never minted, have expired or
        were already used are refused, so a published file can't be replaced.
        """
        with self._lock:
            expires_at = self._pending.pop(file_id, None)
        if expires_at is not None and expires_at > time.time():
            return
        if self.path_for(file_id).exists():
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Upload already completed")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown or expired upload id")

    def clear_pending(self) -> None:
        with self._lock:
            self._pending.clear()

    @staticmethod
    def public_path(file_id: str) -> str:
        return f"{PUBLIC_PREFIX}/{file_id}"

    @staticmethod
    def validate_file_id(file_id: str) -> str:
        """Only ids shaped like the ones we mint may name a file on disk."""
        try:
            return str(uuid.UUID(file_id))
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid upload id")

    def path_for(self, file_id: str) -> Path:
        return self.uploads_dir / file_id

    async def write_stream(self, file_id: str, chunks: AsyncIterator[bytes]) -> int:
        """
        Stream ``chunks`` to ``{file_id}.part`` and rename into place once
        the body is complete.  Nothing is left behind on failure.
        """
        self.ensure_dir()
        final_path = self.path_for(file_id)
        temp_path = final_path.with_name(f"{file_id}.part")
        total_size = 0

        # "x" fails if another writer already holds the temp file
        f = await aiofiles.open(temp_path, "xb")
        try:
            try:
                async for chunk in chunks:
                    if chunk:
                        total_size += len(chunk)
                        await f.write(chunk)
            finally:
                await f.close()
            os.replace(temp_path, final_path)
        except BaseException:
            try:
                os.remove(temp_path)
            except FileNotFoundError:
                pass
            raise

        logger.info(f"Upload stored: {file_id} ({total_size} bytes)")
        return total_size


_upload_storage: Optional[LocalUploadStorage] = None


def get_upload_storage() -> LocalUploadStorage:
    global _upload_storage
    if _upload_storage is None:
        _upload_storage = LocalUploadStorage(
            settings.UPLOADS_DIR,
            ttl_seconds=settings.UPLOAD_URL_EXPIRE_MINUTES * 60,
        )
    return _upload_storage
