"""RSVP API routes."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from invite_app.database import get_db
from invite_app.dependencies import require_admin
from invite_app.schemas.rsvp import RSVPOut, RSVPSubmit, RSVPSubmitOut, RSVPWithInvitationOut
from invite_app.services import rsvp_service

router = APIRouter()


@router.post("/rsvp", response_model=RSVPSubmitOut)
def submit_rsvp(payload: RSVPSubmit, db: Session = Depends(get_db)):
    """Record a guest's yes/no; resubmitting overwrites the previous answer."""
    rsvp = rsvp_service.submit_rsvp(
        db,
        slug=payload.slug,
        response=payload.response,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )
    return RSVPSubmitOut(rsvp=RSVPOut.model_validate(rsvp))


@router.get("/rsvp/{slug}", response_model=RSVPOut)
def get_rsvp(slug: str, db: Session = Depends(get_db)):
    rsvp = rsvp_service.get_rsvp_by_slug(db, slug)
    if not rsvp:
        raise HTTPException(status_code=404, detail="RSVP not found")
    return rsvp


@router.get("/rsvps", response_model=list[RSVPWithInvitationOut], dependencies=[Depends(require_admin)])
def list_rsvps_with_invitations(db: Session = Depends(get_db)):
    """All responses joined with the invitee's name and pronoun."""
    return rsvp_service.list_rsvps_with_invitations(db)


@router.get("/rsvps/raw", response_model=list[RSVPOut], dependencies=[Depends(require_admin)])
def list_rsvps(db: Session = Depends(get_db)):
    return rsvp_service.list_rsvps(db)
