"""Point-in-time file snapshots of the SQLite database.

The copy is taken while the app keeps serving requests: it is consistent as
far as SQLite's own file format goes, not per request.
"""
import logging
import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import text

from invite_app.database import Database

logger = logging.getLogger(__name__)

SNAPSHOT_PREFIX = "invitations-"
SNAPSHOT_SUFFIX = ".db"


def _checkpoint(database: Database) -> None:
    """Fold committed WAL pages back into the main file before copying it."""
    with database.engine.connect() as conn:
        conn.execute(text("PRAGMA wal_checkpoint(PASSIVE)"))


def prune_snapshots(backup_dir: Path, keep: int) -> list[Path]:
    """Delete all but the newest ``keep`` snapshots (at least one); return what was removed."""
    snapshots = sorted(backup_dir.glob(f"{SNAPSHOT_PREFIX}*{SNAPSHOT_SUFFIX}"))
    stale = snapshots[:-max(keep, 1)]
    for path in stale:
        path.unlink()
        logger.info("Removed old backup %s", path)
    return stale


def snapshot_database(database: Database, backup_dir: str, keep: int = 7) -> Optional[Path]:
    """Copy the database file into ``backup_dir`` and keep the last ``keep`` copies."""
    source = database.sqlite_path
    if source is None:
        logger.warning("Backups only cover file-backed SQLite databases; skipping %s", database.url.drivername)
        return None
    if not os.path.exists(source):
        logger.warning("Database file %s does not exist yet; skipping backup", source)
        return None

    target_dir = Path(backup_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    _checkpoint(database)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    target = target_dir / f"{SNAPSHOT_PREFIX}{stamp}{SNAPSHOT_SUFFIX}"
    shutil.copy2(source, target)
    logger.info("Backup created: %s", target)

    prune_snapshots(target_dir, keep)
    return target
