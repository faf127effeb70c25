"""
Bookings router.

  GET  /bookings → every booking with its traveler and trip (admin)
  POST /bookings → book a trip for a traveler; status defaults to "pending"
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.core.dependencies import get_current_admin
from app.core.exceptions import NotFoundException
from app.models.trip import Booking, Trip
from app.models.user import User
from app.schemas.trip import BookingCreateRequest, BookingOut

router = APIRouter()


@router.get("", response_model=List[BookingOut])
def list_bookings(
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    return (
        db.query(Booking)
        .options(joinedload(Booking.user), joinedload(Booking.trip))
        .order_by(Booking.created_at.desc())
        .all()
    )


@router.post("", response_model=BookingOut, status_code=201)
def create_booking(body: BookingCreateRequest, db: Session = Depends(get_db)):
    """Both the traveler and the trip must exist."""
    if db.get(User, body.user_id) is None:
        raise NotFoundException("User")
    if db.get(Trip, body.trip_id) is None:
        raise NotFoundException("Trip")

    booking = Booking(
        user_id=body.user_id,
        trip_id=body.trip_id,
        status=body.status or "pending",
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking
