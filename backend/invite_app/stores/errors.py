"""Translate SQLAlchemy failures into domain errors at the store boundary."""
import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from invite_app.exceptions import DuplicateSlugError, StorageError

logger = logging.getLogger(__name__)


def is_slug_conflict(exc: IntegrityError) -> bool:
    """True when the integrity error is the unique index on a slug column.

    SQLite: ``UNIQUE constraint failed: invitations.slug``
    PostgreSQL: ``duplicate key value ... Key (slug)=(abc12) already exists``
    """
    message = str(exc.orig).lower()
    return ("unique" in message or "duplicate" in message) and "slug" in message


@contextmanager
def storage_errors(db: Session, slug: Optional[str] = None):
    """Roll back and re-raise database failures as domain errors.

    A slug unique-index violation becomes ``DuplicateSlugError`` when a slug
    is given; everything else becomes ``StorageError``.
    """
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        if slug is not None and is_slug_conflict(exc):
            logger.warning("Slug conflict on '%s'", slug)
            raise DuplicateSlugError(slug) from exc
        logger.error("Integrity error: %s", exc.orig)
        raise StorageError(f"Constraint violation: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database error: %s", exc)
        raise StorageError("Database operation failed") from exc
