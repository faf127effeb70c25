from sqlalchemy import Column, String
from app.database import Base
from app.models.mixins import MediaRecordMixin


class CustomPilgrimage(MediaRecordMixin, Base):
    """Hero section of the custom pilgrimage page: a title, four subtitles and a hero image."""
    __tablename__ = "custom_pilgrimages"

    title = Column(String(255), nullable=False)
    subtitle1 = Column(String(255), nullable=True)
    subtitle2 = Column(String(255), nullable=True)
    subtitle3 = Column(String(255), nullable=True)
    subtitle4 = Column(String(255), nullable=True)
