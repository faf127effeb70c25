from datetime import datetime
from typing import Optional
from app.schemas.common import MediaRecordOut, RecordForm


class CustomPilgrimageForm(RecordForm):
    title: Optional[str] = None
    subtitle1: Optional[str] = None
    subtitle2: Optional[str] = None
    subtitle3: Optional[str] = None
    subtitle4: Optional[str] = None


class CustomPilgrimageOut(MediaRecordOut):
    title: str
    subtitle1: Optional[str] = None
    subtitle2: Optional[str] = None
    subtitle3: Optional[str] = None
    subtitle4: Optional[str] = None
    created_at: datetime
