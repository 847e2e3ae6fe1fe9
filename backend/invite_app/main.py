"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invite_app.config import Settings, settings as default_settings
from invite_app.database import Database
from invite_app.exceptions import InvitationAppError
from invite_app.routers import admin, invitations, rsvp
from invite_app.scheduler import init_scheduler, shutdown_scheduler

logger = logging.getLogger(__name__)


async def invitation_app_error_handler(request: Request, exc: InvitationAppError):
    """Answer domain errors with their status code and a JSON detail."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables for SQLite dev mode and run the backup job when enabled."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    if database.is_sqlite:
        database.create_all()
    if settings.BACKUP_ENABLED:
        init_scheduler(database, settings)
    try:
        yield
    finally:
        if settings.BACKUP_ENABLED:
            shutdown_scheduler()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the app around an explicit settings object and storage handle."""
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if database is None:
        database = Database(settings.DATABASE_URL, busy_timeout=settings.SQLITE_BUSY_TIMEOUT)

    app = FastAPI(
        title="Party Invitations",
        description="Personalized invitations addressed by short slugs, with yes/no RSVPs",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvitationAppError, invitation_app_error_handler)

    # Register routers
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
    app.include_router(invitations.router, prefix="/api", tags=["Invitations"])
    app.include_router(rsvp.router, prefix="/api", tags=["RSVP"])

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
