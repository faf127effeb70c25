from sqlalchemy import Column, String, Text
from app.database import Base
from app.models.mixins import RecordMixin


class KnowledgeDocument(RecordMixin, Base):
    """Downloadable PDF for the knowledge page. Stored in Cloudinary as a raw resource."""
    __tablename__ = "knowledge_documents"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    file_url = Column(String(500), nullable=True, comment="Cloudinary secure_url of the PDF")
    public_id = Column(String(255), nullable=True, comment="Cloudinary public_id (resource_type raw)")
