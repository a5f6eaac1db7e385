# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import build_sqlalchemy_db_url, settings
from app.database import Base, engine
from app.error_handlers import register_error_handlers
from app.models import Post, Profile, User  # noqa: F401  # register tables on Base.metadata
from app.api.routes.health import router as health_router
from app.routers import auth, users
from app.routers.posts import router as posts_router
from app.routers.profile import router as profile_router


def create_app() -> FastAPI:
    logging.getLogger("app").setLevel(settings.log_level.upper())

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(posts_router)
    application.include_router(profile_router)

    # Shared MySQL schemas are managed explicitly (scripts/create_orm_tables.py);
    # local/test sqlite databases are created on startup.
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
