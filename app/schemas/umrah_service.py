from datetime import datetime
from typing import List, Optional
from app.schemas.common import GalleryImageOut, MediaRecordOut, RecordForm


class UmrahServiceForm(RecordForm):
    title: Optional[str] = None
    description: Optional[str] = None


class UmrahServiceOut(MediaRecordOut):
    """image_url is the hero image; images is the service gallery."""
    title: str
    description: str
    images: List[GalleryImageOut] = []
    created_at: datetime
