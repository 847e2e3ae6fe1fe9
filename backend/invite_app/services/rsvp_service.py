"""RSVP service: guest submissions against existing invitations."""
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from invite_app.exceptions import InvitationNotFoundError, ValidationError
from invite_app.models.rsvp_response import RSVPChoice, RSVPResponse
from invite_app.stores.invitation_store import InvitationStore
from invite_app.stores.rsvp_store import RSVPStore

logger = logging.getLogger(__name__)


def _parse_choice(response: Any) -> RSVPChoice:
    try:
        return RSVPChoice(response)
    except ValueError:
        raise ValidationError(f"Invalid RSVP response: {response!r} (expected 'yes' or 'no')") from None


def submit_rsvp(
    db: Session,
    slug: str,
    response: Any,
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
) -> RSVPResponse:
    """Record or overwrite the guest's answer for ``slug``.

    Raises ValidationError before touching storage when slug/response are
    missing or the response is not yes/no, and InvitationNotFoundError when
    no invitation carries the slug.
    """
    if not slug or not response:
        raise ValidationError("Slug and response are required")
    choice = _parse_choice(response)

    if InvitationStore(db).get_by_slug(slug) is None:
        logger.warning("RSVP for unknown slug %s rejected", slug)
        raise InvitationNotFoundError(slug)

    return RSVPStore(db).upsert(slug, choice, name=name, email=email, phone=phone)


def get_rsvp_by_slug(db: Session, slug: str) -> Optional[RSVPResponse]:
    return RSVPStore(db).get_by_slug(slug)


def list_rsvps(db: Session) -> list[RSVPResponse]:
    return RSVPStore(db).get_all()


def list_rsvps_with_invitations(db: Session) -> list[dict[str, Any]]:
    return RSVPStore(db).get_all_with_invitations()
