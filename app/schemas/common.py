"""
Shared schema pieces: the toggle body, the message response, and the
helpers every dashboard form schema uses.
"""
import math
from typing import Any, Optional
from uuid import UUID
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator


def blank_to_none(v: Any) -> Any:
    """Multipart forms send empty strings for untouched inputs; treat them as absent."""
    if isinstance(v, str) and not v.strip():
        return None
    if isinstance(v, str):
        return v.strip()
    return v


# Prices are stored as Numeric(12, 2): at most ten digits before the point
MAX_PRICE = 10 ** 10


def validate_price(v: float) -> float:
    """Shared by package and trip prices. NaN and infinity never reach the database."""
    if not math.isfinite(v):
        raise ValueError("price must be a finite number")
    if v <= 0:
        raise ValueError("price must be greater than 0")
    if v >= MAX_PRICE:
        raise ValueError(f"price must be less than {MAX_PRICE:,}")
    return v


def first_error_message(errors) -> str:
    """First pydantic error as a single human-readable sentence."""
    error = errors[0]
    msg = error["msg"]
    if msg.startswith("Value error, "):
        return msg[len("Value error, "):]
    # Drop FastAPI's "body"/"query" prefix; keep the field path
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    return f"{field}: {msg}" if field else msg


def validation_message(exc: ValidationError) -> str:
    return first_error_message(exc.errors())


class RecordForm(BaseModel):
    """Base for the multipart forms posted by the dashboards."""
    model_config = ConfigDict(extra="ignore")

    is_active: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_active", "isActive"),
    )

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, v):
        return blank_to_none(v)


class RecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    is_active: bool

    @field_validator("id", mode="before")
    @classmethod
    def uuid_to_str(cls, v) -> str:
        return str(v)


class MediaRecordOut(RecordOut):
    image_url: Optional[str] = None
    public_id: Optional[str] = None


class GalleryImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    url: str
    public_id: str


class ToggleActiveRequest(BaseModel):
    """PATCH body for every dashboard collection: {id, is_active}."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    is_active: bool = Field(validation_alias=AliasChoices("is_active", "isActive"))


class MessageResponse(BaseModel):
    message: str
