from datetime import datetime
from typing import List, Optional
from app.schemas.common import GalleryImageOut, MediaRecordOut, RecordForm


class InternationalTourForm(RecordForm):
    title: Optional[str] = None
    description: Optional[str] = None


class InternationalTourOut(MediaRecordOut):
    """image_url is the background image; images is the slider gallery."""
    title: str
    description: str
    images: List[GalleryImageOut] = []
    created_at: datetime
