from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.mixins import GalleryImageMixin, MediaRecordMixin


class UmrahService(MediaRecordMixin, Base):
    """Umrah service entry: optional hero image (image_url/public_id) and a service gallery."""
    __tablename__ = "umrah_services"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    images = relationship(
        "UmrahServiceImage",
        cascade="all, delete-orphan",
        order_by="UmrahServiceImage.position",
        lazy="selectin",
    )


class UmrahServiceImage(GalleryImageMixin, Base):
    __tablename__ = "umrah_service_images"

    service_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("umrah_services.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
