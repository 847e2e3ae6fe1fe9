"""Pydantic schemas for RSVP responses."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from invite_app.models.rsvp_response import RSVPChoice


class RSVPSubmit(BaseModel):
    slug: str
    response: str  # yes / no, checked by rsvp_service
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class RSVPOut(BaseModel):
    id: int
    slug: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    response: RSVPChoice
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RSVPSubmitOut(BaseModel):
    success: bool = True
    rsvp: RSVPOut


class RSVPWithInvitationOut(RSVPOut):
    invitation_name: Optional[str] = None
    invitation_pronoun: Optional[str] = None

