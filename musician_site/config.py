# musician_site/config.py

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Sessions
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 60 * 24 * 7
    SESSION_COOKIE_NAME: str = "musician_session"

    # Uploads
    UPLOADS_DIR: str = "public/uploads"
    # How long a minted upload URL stays valid
    UPLOAD_URL_EXPIRE_MINUTES: int = 60
    # Origin used in minted upload URLs; the request origin is used when empty
    PUBLIC_BASE_URL: Optional[str] = None

    # Seed
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    SEED_DEMO_CONTENT: bool = False

    LOG_LEVEL: str = "INFO"

    # CORS
    FRONTEND_URLS: str = "http://localhost:5173,http://localhost:5000"

    @property
    def allowed_origins(self) -> List[str]:
        all_urls = []
        for url in self.FRONTEND_URLS.split(","):
            url = url.strip()
            if url:
                all_urls.append(url)
                if url.startswith("http://"):
                    all_urls.append(url.replace("http://", "https://"))
        return all_urls

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
