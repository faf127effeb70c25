from datetime import datetime
from typing import Optional
from app.schemas.common import MediaRecordOut, RecordForm


class WhyChooseUsForm(RecordForm):
    title: Optional[str] = None
    description: Optional[str] = None


class WhyChooseUsOut(MediaRecordOut):
    title: str
    description: str
    created_at: datetime
