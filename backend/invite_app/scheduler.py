"""Background scheduler for periodic database backups.

Uses APScheduler so the snapshot job runs next to the web app without a
separate cron entry.
"""
import logging
from typing import Optional

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_MISSED
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from invite_app.backup import snapshot_database
from invite_app.config import Settings
from invite_app.database import Database

logger = logging.getLogger(__name__)

BACKUP_JOB_ID = "snapshot_database"

# Global scheduler instance
scheduler: Optional[BackgroundScheduler] = None


def _on_job_error(event):
    logger.error(
        "Scheduled job FAILED: job_id=%s error=%s",
        event.job_id,
        event.exception,
    )
    if event.traceback:
        logger.error("Traceback for job %s:\n%s", event.job_id, event.traceback)


def _on_job_missed(event):
    logger.warning(
        "Scheduled job MISSED: job_id=%s scheduled_run_time=%s",
        event.job_id,
        event.scheduled_run_time,
    )


def init_scheduler(database: Database, settings: Settings) -> BackgroundScheduler:
    """Build and start the scheduler with the backup job; idempotent."""
    global scheduler

    if scheduler is not None:
        logger.warning("Scheduler already initialized")
        return scheduler

    scheduler = BackgroundScheduler(
        timezone="UTC",
        job_defaults={
            "coalesce": True,
            "max_instances": 1,
            "misfire_grace_time": 300,
        },
    )
    scheduler.add_job(
        func=snapshot_database,
        trigger=IntervalTrigger(hours=settings.BACKUP_INTERVAL_HOURS),
        kwargs={
            "database": database,
            "backup_dir": settings.BACKUP_DIR,
            "keep": settings.BACKUP_KEEP,
        },
        id=BACKUP_JOB_ID,
        name="Snapshot Invitation Database",
        replace_existing=True,
    )
    scheduler.add_listener(_on_job_error, EVENT_JOB_ERROR)
    scheduler.add_listener(_on_job_missed, EVENT_JOB_MISSED)
    scheduler.start()
    logger.info(
        "Scheduled job: %s (every %d hours, keeping %d copies in %s)",
        BACKUP_JOB_ID,
        settings.BACKUP_INTERVAL_HOURS,
        settings.BACKUP_KEEP,
        settings.BACKUP_DIR,
    )
    return scheduler


def shutdown_scheduler() -> None:
    global scheduler

    if scheduler is not None:
        scheduler.shutdown(wait=True)
        scheduler = None
        logger.info("Background scheduler shutdown complete")
