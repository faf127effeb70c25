from sqlalchemy import Column, String, Text
from app.database import Base
from app.models.mixins import MediaRecordMixin


class WhyChooseUsItem(MediaRecordMixin, Base):
    __tablename__ = "why_choose_us_items"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
