import uuid
from sqlalchemy import Column, String, Numeric, TIMESTAMP, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.mixins import _utcnow


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    title = Column(String(255), nullable=False)
    destination = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    start_date = Column(TIMESTAMP(timezone=True), nullable=False)
    end_date = Column(TIMESTAMP(timezone=True), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    bookings = relationship("Booking", back_populates="trip")


class Booking(Base):
    """
    A traveler's booking of a trip.
    RESTRICT on both foreign keys: trips and travelers with bookings cannot be deleted.
    """
    __tablename__ = "bookings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    trip_id = Column(Uuid(as_uuid=True), ForeignKey("trips.id", ondelete="RESTRICT"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending", server_default="pending")
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="bookings")
    trip = relationship("Trip", back_populates="bookings")
