from sqlalchemy import Column, String, Text
from app.database import Base
from app.models.mixins import RecordMixin


class Video(RecordMixin, Base):
    """Embedded video link. Nothing is uploaded; video_url is stored in embed form."""
    __tablename__ = "videos"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    video_url = Column(String(500), nullable=False)
