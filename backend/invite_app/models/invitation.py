"""Invitation ORM model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from invite_app.database import Base
from invite_app.models.clock import utcnow


class Invitation(Base):
    __tablename__ = "invitations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    pronoun = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    invite_to_party = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
