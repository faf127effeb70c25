"""
Schemas for the priced, categorized packages (Hajj, Umrah, Domestic).
"""
from datetime import datetime
from typing import Optional
from pydantic import field_validator

from app.schemas.common import MediaRecordOut, RecordForm, validate_price

PACKAGE_CATEGORIES = ("Economic", "Standard", "Premium")


def normalize_category(value: str) -> str:
    """'ECONOMIC' / 'economic' / 'Economic' all become 'Economic'."""
    value = value.strip()
    return value[:1].upper() + value[1:].lower()


class PackageForm(RecordForm):
    """
    Create/update form. Every field is optional here; which ones are
    required on create is decided by the record type.
    """
    title: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None

    @field_validator("price")
    @classmethod
    def price_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return v
        return validate_price(v)

    @field_validator("category")
    @classmethod
    def category_known(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = normalize_category(v)
        if v not in PACKAGE_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(PACKAGE_CATEGORIES)}")
        return v


class PackageOut(MediaRecordOut):
    title: str
    price: float
    category: str
    created_at: datetime
