"""RSVP persistence: at most one response per slug, written by atomic upsert."""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from invite_app.exceptions import StorageError
from invite_app.models.clock import utcnow
from invite_app.models.invitation import Invitation
from invite_app.models.rsvp_response import RSVPChoice, RSVPResponse
from invite_app.stores.errors import storage_errors

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class RSVPStore:
    def __init__(self, db: Session):
        self.db = db

    def _insert_construct(self):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_INSERTS[dialect]
        except KeyError:
            raise StorageError(f"Upsert is not supported on the '{dialect}' dialect") from None

    def upsert(
        self,
        slug: str,
        response: RSVPChoice,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> RSVPResponse:
        """Insert the response for ``slug`` or overwrite the existing one.

        Runs as a single INSERT ... ON CONFLICT (slug) DO UPDATE, so two
        concurrent first submissions cannot both insert. ``created_at`` is
        only written by the insert branch.
        """
        now = utcnow()
        table = RSVPResponse.__table__
        stmt = self._insert_construct()(table).values(
            slug=slug,
            name=name or None,
            email=email or None,
            phone=phone or None,
            response=RSVPChoice(response),
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.slug],
            set_={
                "name": stmt.excluded.name,
                "email": stmt.excluded.email,
                "phone": stmt.excluded.phone,
                "response": stmt.excluded.response,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        with storage_errors(self.db):
            self.db.execute(stmt)
            self.db.commit()
            rsvp = self.db.scalars(select(RSVPResponse).where(RSVPResponse.slug == slug)).one()
        logger.info("Stored RSVP '%s' for slug %s", rsvp.response.value, slug)
        return rsvp

    def get_by_slug(self, slug: str) -> Optional[RSVPResponse]:
        with storage_errors(self.db):
            return self.db.scalars(select(RSVPResponse).where(RSVPResponse.slug == slug)).first()

    def get_all(self) -> list[RSVPResponse]:
        stmt = select(RSVPResponse).order_by(RSVPResponse.created_at.desc(), RSVPResponse.id.desc())
        with storage_errors(self.db):
            return list(self.db.scalars(stmt))

    def get_all_with_invitations(self) -> list[dict[str, Any]]:
        """Every response with its invitation's name/pronoun (None when deleted)."""
        stmt = (
            select(
                RSVPResponse,
                Invitation.name.label("invitation_name"),
                Invitation.pronoun.label("invitation_pronoun"),
            )
            .outerjoin(Invitation, Invitation.slug == RSVPResponse.slug)
            .order_by(RSVPResponse.created_at.desc(), RSVPResponse.id.desc())
        )
        with storage_errors(self.db):
            rows = self.db.execute(stmt).all()
        return [
            {
                "id": rsvp.id,
                "slug": rsvp.slug,
                "name": rsvp.name,
                "email": rsvp.email,
                "phone": rsvp.phone,
                "response": rsvp.response.value,
                "created_at": rsvp.created_at,
                "updated_at": rsvp.updated_at,
                "invitation_name": invitation_name,
                "invitation_pronoun": invitation_pronoun,
            }
            for rsvp, invitation_name, invitation_pronoun in rows
        ]
