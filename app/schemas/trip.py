"""
Trip and booking schemas.
"""
from pydantic import BaseModel, field_validator, model_validator, ConfigDict
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from app.schemas.common import validate_price
from app.schemas.user import UserOut

BOOKING_STATUSES = ("pending", "confirmed", "cancelled")


class TripCreateRequest(BaseModel):
    title: str
    destination: str
    price: float
    start_date: datetime
    end_date: datetime

    @field_validator("title", "destination")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title and destination are required")
        return v

    @field_validator("price")
    @classmethod
    def price_positive(cls, v: float) -> float:
        return validate_price(v)

    @model_validator(mode="after")
    def dates_ordered(self) -> "TripCreateRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BookingCreateRequest(BaseModel):
    user_id: UUID
    trip_id: UUID
    status: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_known(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().lower()
        if v not in BOOKING_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(BOOKING_STATUSES)}")
        return v


class _IdAsStr(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def uuid_to_str(cls, v) -> str:
        return str(v)


class TripSummaryOut(_IdAsStr):
    title: str
    destination: str
    price: float
    start_date: datetime
    end_date: datetime
    created_at: datetime


class BookingSummaryOut(_IdAsStr):
    user_id: str
    trip_id: str
    status: str
    created_at: datetime

    @field_validator("user_id", "trip_id", mode="before")
    @classmethod
    def fk_to_str(cls, v) -> str:
        return str(v)


class TripOut(TripSummaryOut):
    """GET /trips: each trip with its bookings."""
    bookings: List[BookingSummaryOut] = []


class BookingOut(BookingSummaryOut):
    """GET /bookings: each booking with its traveler and trip."""
    user: Optional[UserOut] = None
    trip: Optional[TripSummaryOut] = None
