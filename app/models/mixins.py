import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Integer, Numeric, String, TIMESTAMP, Uuid
from sqlalchemy.sql import func


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordMixin:
    """id, is_active and created_at: shared by every dashboard record."""
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default="true")
    # Python-side default keeps microsecond ordering on SQLite as well
    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        index=True,
    )


class MediaRecordMixin(RecordMixin):
    """
    Columns shared by every dashboard record that carries a Cloudinary image.

    image_url and public_id always describe the same stored object: both are
    written together after a successful upload and never point at an object
    that has already been destroyed.
    """
    image_url = Column(String(500), nullable=True, comment="Public HTTPS URL of the attached image")
    public_id = Column(String(255), nullable=True, comment="Cloudinary public_id, used only for deletion")


class PricedPackageMixin(MediaRecordMixin):
    """Title + price + category shape shared by the Hajj, Umrah and Domestic tables."""
    title = Column(String(255), nullable=False)
    price = Column(
        # asdecimal=False: price comes back as float, matching the JSON surface
        Numeric(12, 2, asdecimal=False),
        nullable=False,
    )
    category = Column(String(20), nullable=False, index=True, comment="Economic | Standard | Premium")


class GalleryImageMixin:
    """One image of a record's gallery. Rows are owned by the parent record."""
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    url = Column(String(500), nullable=False)
    public_id = Column(String(255), nullable=False)
    position = Column(Integer, nullable=False, default=0, comment="Display order within the gallery")
