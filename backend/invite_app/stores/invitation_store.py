"""Invitation persistence keyed by unique slug.

Every method is one storage round-trip; slug uniqueness is enforced by the
unique index on ``invitations.slug``, never by a read-then-write check here.
"""
import logging
from typing import Any, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.orm import Session

from invite_app.models.clock import utcnow
from invite_app.models.invitation import Invitation
from invite_app.stores.errors import storage_errors

logger = logging.getLogger(__name__)


class InvitationStore:
    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, stmt):
        return stmt.order_by(Invitation.created_at.desc(), Invitation.id.desc())

    def get_by_slug(self, slug: str) -> Optional[Invitation]:
        with storage_errors(self.db):
            return self.db.scalars(select(Invitation).where(Invitation.slug == slug)).first()

    def get_by_id(self, invitation_id: int) -> Optional[Invitation]:
        with storage_errors(self.db):
            return self.db.get(Invitation, invitation_id)

    def get_all(self) -> list[Invitation]:
        with storage_errors(self.db):
            return list(self.db.scalars(self._newest_first(select(Invitation))))

    def search(self, query: str) -> list[Invitation]:
        """Invitations whose name or slug contains ``query`` (LIKE semantics)."""
        stmt = select(Invitation).where(
            or_(
                Invitation.name.contains(query, autoescape=True),
                Invitation.slug.contains(query, autoescape=True),
            )
        )
        with storage_errors(self.db):
            return list(self.db.scalars(self._newest_first(stmt)))

    def create(self, fields: dict[str, Any]) -> Invitation:
        """Insert one invitation; raises DuplicateSlugError on a taken slug."""
        now = utcnow()
        invitation = Invitation(
            slug=fields["slug"],
            name=fields["name"],
            pronoun=fields["pronoun"],
            message=fields["message"],
            invite_to_party=bool(fields.get("invite_to_party", True)),
            created_at=now,
            updated_at=now,
        )
        with storage_errors(self.db, slug=invitation.slug):
            self.db.add(invitation)
            self.db.commit()
            self.db.refresh(invitation)
        logger.info("Created invitation %s (slug=%s)", invitation.id, invitation.slug)
        return invitation

    def update(self, invitation_id: int, fields: dict[str, Any]) -> bool:
        """Overwrite all mutable fields; False when no row has this id."""
        values = {
            "slug": fields["slug"],
            "name": fields["name"],
            "pronoun": fields["pronoun"],
            "message": fields["message"],
            "invite_to_party": bool(fields.get("invite_to_party", True)),
            "updated_at": utcnow(),
        }
        stmt = (
            update(Invitation)
            .where(Invitation.id == invitation_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with storage_errors(self.db, slug=values["slug"]):
            result = self.db.execute(stmt)
            self.db.commit()
        if result.rowcount == 0:
            return False
        logger.info("Updated invitation %s (slug=%s)", invitation_id, values["slug"])
        return True

    def delete(self, invitation_id: int) -> bool:
        """Remove the row; RSVP responses for its slug are left in place."""
        stmt = (
            delete(Invitation)
            .where(Invitation.id == invitation_id)
            .execution_options(synchronize_session=False)
        )
        with storage_errors(self.db):
            result = self.db.execute(stmt)
            self.db.commit()
        if result.rowcount == 0:
            return False
        logger.info("Deleted invitation %s", invitation_id)
        return True
