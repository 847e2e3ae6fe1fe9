"""Invitation API routes: public lookup by slug, admin CRUD by id."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from invite_app.database import get_db
from invite_app.dependencies import require_admin
from invite_app.schemas.invitation import InvitationCreate, InvitationOut, InvitationUpdate, SuccessOut
from invite_app.services import invitation_service

router = APIRouter()


@router.get("/invitation/{slug}", response_model=InvitationOut)
def get_invitation_by_slug(slug: str, db: Session = Depends(get_db)):
    """Guest-facing: fetch the invitation behind a shared slug."""
    invitation = invitation_service.get_invitation_by_slug(db, slug)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")
    return invitation


@router.get("/invitations", response_model=list[InvitationOut], dependencies=[Depends(require_admin)])
def list_invitations(search: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """List invitations newest first, filtered by name/slug substring when searching."""
    return invitation_service.list_invitations(db, search=search)


@router.get("/invitations/{invitation_id}", response_model=InvitationOut, dependencies=[Depends(require_admin)])
def get_invitation(invitation_id: int, db: Session = Depends(get_db)):
    invitation = invitation_service.get_invitation(db, invitation_id)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")
    return invitation


@router.post(
    "/invitations",
    response_model=InvitationOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_invitation(payload: InvitationCreate, db: Session = Depends(get_db)):
    """Create an invitation; the slug is generated when omitted."""
    return invitation_service.create_invitation(db, payload.model_dump())


@router.put("/invitations/{invitation_id}", response_model=SuccessOut, dependencies=[Depends(require_admin)])
def update_invitation(invitation_id: int, payload: InvitationUpdate, db: Session = Depends(get_db)):
    """Overwrite every field of an invitation, slug included."""
    if not invitation_service.update_invitation(db, invitation_id, payload.model_dump()):
        raise HTTPException(status_code=404, detail="Invitation not found")
    return SuccessOut()


@router.delete("/invitations/{invitation_id}", response_model=SuccessOut, dependencies=[Depends(require_admin)])
def delete_invitation(invitation_id: int, db: Session = Depends(get_db)):
    if not invitation_service.delete_invitation(db, invitation_id):
        raise HTTPException(status_code=404, detail="Invitation not found")
    return SuccessOut()
