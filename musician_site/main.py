from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from musician_site.config import settings
from musician_site.core.exceptions import register_exception_handlers
from musician_site.core.logger import setup_logging
from musician_site.core.seed import seed_database
from musician_site.database import SessionLocal, init_db
from musician_site.routers import (
    auth,
    content,
    albums,
    tracks,
    videos,
    events,
    press,
    photos,
    contact,
    uploads,
)
from musician_site.services.uploads import PUBLIC_PREFIX, get_upload_storage

SERVICE_NAME = "Musician Site API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info(f"{SERVICE_NAME} ready")
    yield


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Content API for a musician's promotional website",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(auth.router, prefix="/api", tags=["Auth"])
    app.include_router(content.router, prefix="/api/content", tags=["Content"])
    app.include_router(albums.router, prefix="/api/albums", tags=["Albums"])
    app.include_router(tracks.router, prefix="/api/tracks", tags=["Tracks"])
    app.include_router(videos.router, prefix="/api/videos", tags=["Videos"])
    app.include_router(events.router, prefix="/api/events", tags=["Events"])
    app.include_router(press.router, prefix="/api/press", tags=["Press"])
    app.include_router(photos.router, prefix="/api/photos", tags=["Photos"])
    app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
    app.include_router(uploads.router, prefix="/api/uploads", tags=["Uploads"])

    @app.get("/api/health")
    def health_check():
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
        }

    upload_storage = get_upload_storage()
    upload_storage.ensure_dir()
    app.mount(PUBLIC_PREFIX, StaticFiles(directory=str(upload_storage.uploads_dir)), name="uploads")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("musician_site.main:app", host=settings.HOST, port=settings.PORT)
