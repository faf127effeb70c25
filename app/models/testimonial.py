from sqlalchemy import Column, Float, String, Text
from app.database import Base
from app.models.mixins import MediaRecordMixin


class Testimonial(MediaRecordMixin, Base):
    """Customer testimonial with a 1.0 to 5.0 star rating and a portrait."""
    __tablename__ = "testimonials"

    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False, comment="Role or trip shown under the name")
    description = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)
