import uuid
from sqlalchemy import Column, String, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.mixins import _utcnow


class User(Base):
    """Traveler account referenced by bookings. Admins are not stored here."""
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    # ── Relationships ──────────────────────────────────────────────────────────
    bookings = relationship("Booking", back_populates="user")
