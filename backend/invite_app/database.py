"""Storage handle: one engine + session factory per database URL.

The handle is built explicitly (by ``create_app`` or by a test) and passed
around, so every test can point the app at its own SQLite file.
"""
import logging
import os
from collections.abc import Iterator
from typing import Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: str, busy_timeout: int = 30, echo: bool = False):
        self.url = make_url(url)
        connect_args = {}
        if self.is_sqlite:
            connect_args = {"check_same_thread": False, "timeout": busy_timeout}

        self.engine = create_engine(url, connect_args=connect_args, echo=echo, pool_pre_ping=True)

        if self.is_sqlite:
            # WAL lets readers (and file backups) run alongside a writer
            @event.listens_for(self.engine, "connect")
            def _set_sqlite_pragma(dbapi_conn, connection_record):
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout) * 1000}")
                cursor.close()

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    @property
    def sqlite_path(self) -> Optional[str]:
        """Filesystem path of a file-backed SQLite database, else None."""
        if not self.is_sqlite or not self.url.database or self.url.database == ":memory:":
            return None
        return self.url.database

    def _ensure_sqlite_dir(self) -> None:
        path = self.sqlite_path
        if path:
            directory = os.path.dirname(os.path.abspath(path))
            os.makedirs(directory, exist_ok=True)

    def create_all(self) -> None:
        self._ensure_sqlite_dir()
        # Models must be imported so they register with Base.metadata
        from invite_app.models import invitation, rsvp_response  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Ensured tables exist on %s", self.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session from the app's storage handle."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
