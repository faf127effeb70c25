from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.mixins import GalleryImageMixin, MediaRecordMixin


class InternationalTour(MediaRecordMixin, Base):
    """
    International tour showcase: a background image (image_url/public_id)
    plus a slider gallery. Uploading new slider images replaces the whole gallery.
    """
    __tablename__ = "international_tours"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    images = relationship(
        "TourSliderImage",
        cascade="all, delete-orphan",
        order_by="TourSliderImage.position",
        lazy="selectin",
    )


class TourSliderImage(GalleryImageMixin, Base):
    __tablename__ = "tour_slider_images"

    tour_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("international_tours.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
