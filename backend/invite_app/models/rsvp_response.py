"""RSVPResponse ORM model: one row per invitation slug."""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum as SAEnum

from invite_app.database import Base
from invite_app.models.clock import utcnow


class RSVPChoice(str, enum.Enum):
    yes = "yes"
    no = "no"


class RSVPResponse(Base):
    __tablename__ = "rsvp_responses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Soft reference to invitations.slug; deleting an invitation leaves its response
    slug = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    response = Column(
        SAEnum(RSVPChoice, native_enum=False, length=8, validate_strings=True),
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
