from datetime import datetime
from typing import Optional
from app.schemas.common import RecordForm, RecordOut


class KnowledgeForm(RecordForm):
    title: Optional[str] = None
    description: Optional[str] = None


class KnowledgeOut(RecordOut):
    title: str
    description: str
    file_url: Optional[str] = None
    public_id: Optional[str] = None
    created_at: datetime
