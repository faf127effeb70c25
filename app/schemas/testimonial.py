from datetime import datetime
from typing import Optional
from pydantic import field_validator
from app.schemas.common import MediaRecordOut, RecordForm


class TestimonialForm(RecordForm):
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[float] = None

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 1 <= v <= 5:
            raise ValueError("rating must be between 1.0 and 5.0")
        return v


class TestimonialOut(MediaRecordOut):
    name: str
    title: str
    description: str
    rating: float
    created_at: datetime
