"""
Trips router.

  GET  /trips → all trips with their bookings, newest first
  POST /trips → create a trip (admin)
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.core.dependencies import get_current_admin
from app.models.trip import Trip
from app.schemas.trip import TripCreateRequest, TripOut

router = APIRouter()


@router.get("", response_model=List[TripOut])
def list_trips(db: Session = Depends(get_db)):
    return (
        db.query(Trip)
        .options(selectinload(Trip.bookings))
        .order_by(Trip.created_at.desc())
        .all()
    )


@router.post("", response_model=TripOut, status_code=201)
def create_trip(
    body: TripCreateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    trip = Trip(
        title=body.title,
        destination=body.destination,
        price=body.price,
        start_date=body.start_date,
        end_date=body.end_date,
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)
    return trip
