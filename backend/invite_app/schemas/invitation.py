"""Pydantic schemas for Invitations."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class InvitationCreate(BaseModel):
    name: str
    pronoun: str
    message: str
    slug: Optional[str] = None
    invite_to_party: Optional[bool] = None


class InvitationUpdate(BaseModel):
    name: str
    pronoun: str = ""
    message: str
    slug: str
    invite_to_party: bool = True


class InvitationOut(BaseModel):
    id: int
    slug: str
    name: str
    pronoun: str
    message: str
    invite_to_party: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SuccessOut(BaseModel):
    success: bool = True
