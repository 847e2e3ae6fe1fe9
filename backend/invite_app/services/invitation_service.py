"""Invitation service: slug allocation and admin CRUD.

Responsibilities:
- Required-field validation before any write
- Slug allocation: up to MAX_SLUG_ATTEMPTS random candidates, pre-checked
  against the store; the unique index on ``invitations.slug`` stays the final
  authority when two creators race for the same candidate
- Delegation of every read/write to InvitationStore
"""
import logging
from collections.abc import Callable
from typing import Any, Optional

from sqlalchemy.orm import Session

from invite_app.exceptions import SlugExhaustionError, ValidationError
from invite_app.models.invitation import Invitation
from invite_app.services.slug_generator import generate_slug
from invite_app.stores.invitation_store import InvitationStore

logger = logging.getLogger(__name__)

MAX_SLUG_ATTEMPTS = 10


def _require(fields: dict[str, Any], names: tuple[str, ...]) -> None:
    missing = [name for name in names if not fields.get(name)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def allocate_slug(store: InvitationStore, slug_generator: Optional[Callable[[], str]] = None) -> str:
    """Return the first generated candidate not already in use."""
    slug_generator = slug_generator or generate_slug
    for attempt in range(1, MAX_SLUG_ATTEMPTS + 1):
        candidate = slug_generator()
        if store.get_by_slug(candidate) is None:
            return candidate
        logger.debug("Slug candidate %s taken (attempt %d)", candidate, attempt)
    logger.error("Slug generation exhausted after %d attempts", MAX_SLUG_ATTEMPTS)
    raise SlugExhaustionError(MAX_SLUG_ATTEMPTS)


def create_invitation(
    db: Session,
    fields: dict[str, Any],
    slug_generator: Optional[Callable[[], str]] = None,
) -> Invitation:
    """Create an invitation, generating a slug when none (or an empty one) is given."""
    _require(fields, ("name", "pronoun", "message"))
    store = InvitationStore(db)

    slug = (fields.get("slug") or "").strip()
    if not slug:
        slug = allocate_slug(store, slug_generator)

    invite_to_party = fields.get("invite_to_party")
    return store.create({
        "slug": slug,
        "name": fields["name"],
        "pronoun": fields["pronoun"],
        "message": fields["message"],
        "invite_to_party": True if invite_to_party is None else invite_to_party,
    })


def update_invitation(db: Session, invitation_id: int, fields: dict[str, Any]) -> bool:
    """Overwrite an invitation; False when the id does not exist."""
    fields = {**fields, "slug": (fields.get("slug") or "").strip()}
    _require(fields, ("name", "message", "slug"))
    invite_to_party = fields.get("invite_to_party")
    return InvitationStore(db).update(invitation_id, {
        "slug": fields["slug"],
        "name": fields["name"],
        "pronoun": fields.get("pronoun") or "",
        "message": fields["message"],
        "invite_to_party": True if invite_to_party is None else invite_to_party,
    })


def delete_invitation(db: Session, invitation_id: int) -> bool:
    return InvitationStore(db).delete(invitation_id)


def get_invitation(db: Session, invitation_id: int) -> Optional[Invitation]:
    return InvitationStore(db).get_by_id(invitation_id)


def get_invitation_by_slug(db: Session, slug: str) -> Optional[Invitation]:
    return InvitationStore(db).get_by_slug(slug)


def list_invitations(db: Session, search: Optional[str] = None) -> list[Invitation]:
    """All invitations newest first, or only those matching ``search``."""
    store = InvitationStore(db)
    if search:
        return store.search(search)
    return store.get_all()
