"""
Package record manager: lifecycle of a dashboard record and its Cloudinary files.

One manager instance serves one RecordType. Routers stay thin: they parse the
request, then call list_records / create / update / toggle_active / delete.

Ordering rules that keep the rows and the media objects in step:
  - New files are uploaded BEFORE any row changes. If an upload fails,
    nothing in the database has been touched and the files already
    uploaded for the same request are destroyed again.
  - A superseded file is destroyed only AFTER the commit that stops
    referencing it, so no committed row ever points at a destroyed object.
  - Destroy failures are logged and swallowed. The record operation has
    already succeeded; at worst an unreferenced object is left in Cloudinary.
  - For category-exclusive types the old row is deleted and the new row
    inserted in the same transaction, so the category is never seen empty
    or doubled.
  - A gallery is replaced as a whole: new gallery files swap out every
    child row in the same commit as the parent.

No locking or versioning: two admins editing the same record concurrently
is not coordinated. A crash between upload and commit orphans the uploaded
objects (logged, not reconciled).
"""
import logging
import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, PersistenceException, UploadException, ValidationException
from app.schemas.common import RecordForm
from app.schemas.package import normalize_category
from app.services.cloudinary_service import IMAGE, MediaBlob, MediaStoreError, UploadedMedia
from app.services.record_types import RecordType

logger = logging.getLogger(__name__)

# (public_id, resource_type) of one stored object
MediaRef = Tuple[str, str]


class PackageRecordManager:
    def __init__(self, record_type: RecordType, media_store):
        self.record_type = record_type
        self.model = record_type.model
        self.media_store = media_store
        kind = record_type.media_kind or IMAGE
        self.resource_type = kind.resource_type

    # ── Queries ───────────────────────────────────────────────────────────────

    def list_records(
        self,
        db: Session,
        category: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> List:
        """All records newest-first, optionally narrowed by category and active flag."""
        query = db.query(self.model)
        if category and self.record_type.categorized:
            query = query.filter(self.model.category == normalize_category(category))
        if is_active is not None:
            query = query.filter(self.model.is_active == is_active)
        try:
            return query.order_by(self.model.created_at.desc()).all()
        except SQLAlchemyError as exc:
            logger.error(f"Listing {self.record_type.slug} failed: {exc}")
            raise PersistenceException(f"Failed to fetch {self.record_type.label.lower()}s") from exc

    def get(self, db: Session, record_id) -> object:
        """Return the record or raise 404. Unparseable ids cannot exist, so they 404 too."""
        try:
            key = record_id if isinstance(record_id, uuid.UUID) else uuid.UUID(str(record_id))
        except ValueError:
            raise NotFoundException(self.record_type.label)
        record = db.get(self.model, key)
        if record is None:
            raise NotFoundException(self.record_type.label)
        return record

    # ── Commands ──────────────────────────────────────────────────────────────

    def create(
        self,
        db: Session,
        form: RecordForm,
        media: Optional[MediaBlob] = None,
        gallery: Sequence[MediaBlob] = (),
    ):
        """
        Create a record. Validation happens before any side effect:
        required fields first, then the files.
        """
        rt = self.record_type
        values = form.model_dump(exclude={"is_active"}, exclude_none=True)

        if any(values.get(field) is None for field in rt.required_fields):
            raise ValidationException(rt.missing_fields_message)
        if rt.requires_media and media is None and not gallery:
            raise ValidationException(rt.media_required_message)
        self._check_gallery_size(gallery)

        superseded = []
        if rt.category_exclusive:
            # .all() rather than .first(): also heals any duplicates left by older data
            superseded = db.query(self.model).filter(self.model.category == values["category"]).all()

        uploaded, gallery_uploads = self._upload_all(media, gallery)

        record = self.model(**values)
        record.is_active = True if form.is_active is None else form.is_active
        if uploaded is not None:
            self._attach(record, uploaded)
        if gallery_uploads:
            record.images = self._gallery_rows(gallery_uploads)

        stale = [ref for old in superseded for ref in self._media_refs(old)]
        for old in superseded:
            logger.info(
                f"Replacing {rt.slug} record {old.id} in category '{old.category}'"
            )
            db.delete(old)
        db.add(record)
        self._commit(db, self._fresh_refs(uploaded, gallery_uploads))
        db.refresh(record)

        for ref in stale:
            self._discard_media(*ref)
        return record

    def update(
        self,
        db: Session,
        record_id,
        form: RecordForm,
        media: Optional[MediaBlob] = None,
        gallery: Sequence[MediaBlob] = (),
    ):
        """
        Overwrite only the supplied fields. A new file replaces the old one and
        new gallery files replace the whole gallery; without them the current
        files are kept as they are.
        """
        rt = self.record_type
        record = self.get(db, record_id)
        values = form.model_dump(exclude={"is_active"}, exclude_none=True)

        if rt.categorized and "category" in values and values["category"] != record.category:
            raise ValidationException("category cannot be changed")
        if media is None and not gallery and rt.requires_media and not self._has_media(record):
            raise ValidationException(
                "Cannot remove existing image during update. Upload a replacement or keep the current one."
            )
        self._check_gallery_size(gallery)

        uploaded, gallery_uploads = self._upload_all(media, gallery)

        stale: List[MediaRef] = []
        if uploaded is not None:
            if record.public_id:
                stale.append((record.public_id, self.resource_type))
            self._attach(record, uploaded)
        if gallery_uploads:
            stale.extend((image.public_id, IMAGE.resource_type) for image in record.images)
            record.images = self._gallery_rows(gallery_uploads)

        for field, value in values.items():
            setattr(record, field, value)
        if form.is_active is not None:
            record.is_active = form.is_active

        self._commit(db, self._fresh_refs(uploaded, gallery_uploads))
        db.refresh(record)

        for ref in stale:
            self._discard_media(*ref)
        return record

    def toggle_active(self, db: Session, record_id, is_active: bool):
        """Flip is_active only. No media interaction."""
        if not isinstance(is_active, bool):
            raise ValidationException("ID and is_active status are required")
        record = self.get(db, record_id)
        record.is_active = is_active
        self._commit(db)
        db.refresh(record)
        return record

    def delete(self, db: Session, record_id) -> None:
        """Delete the row (and its gallery rows), then best-effort delete its files."""
        record = self.get(db, record_id)
        refs = self._media_refs(record)
        db.delete(record)
        self._commit(db)
        for ref in refs:
            self._discard_media(*ref)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _check_gallery_size(self, gallery: Sequence[MediaBlob]) -> None:
        limit = self.record_type.gallery_limit
        if len(gallery) > limit:
            raise ValidationException(f"At most {limit} gallery images are allowed")

    def _upload_all(
        self,
        media: Optional[MediaBlob],
        gallery: Sequence[MediaBlob],
    ) -> Tuple[Optional[UploadedMedia], List[UploadedMedia]]:
        """Upload the main file, then the gallery. All or nothing."""
        rt = self.record_type
        done: List[MediaRef] = []
        try:
            uploaded = None
            if media is not None:
                uploaded = self.media_store.upload(
                    media,
                    folder=rt.folder,
                    transformation=rt.transformation,
                    resource_type=self.resource_type,
                )
                done.append((uploaded.public_id, self.resource_type))
            gallery_uploads = []
            for blob in gallery:
                item = self.media_store.upload(
                    blob,
                    folder=rt.gallery_folder,
                    transformation=None,
                    resource_type=IMAGE.resource_type,
                )
                done.append((item.public_id, IMAGE.resource_type))
                gallery_uploads.append(item)
        except UploadException:
            for ref in done:
                self._discard_media(*ref)
            raise
        return uploaded, gallery_uploads

    def _attach(self, record, uploaded: UploadedMedia) -> None:
        setattr(record, self.record_type.url_field, uploaded.url)
        record.public_id = uploaded.public_id

    def _gallery_rows(self, uploads: Sequence[UploadedMedia]) -> list:
        gallery_model = self.record_type.gallery_model
        return [
            gallery_model(url=item.url, public_id=item.public_id, position=position)
            for position, item in enumerate(uploads)
        ]

    def _has_media(self, record) -> bool:
        if getattr(record, self.record_type.url_field, None):
            return True
        return self.record_type.has_gallery and bool(record.images)

    def _media_refs(self, record) -> List[MediaRef]:
        """Every stored object the record references."""
        refs = []
        public_id = getattr(record, "public_id", None)
        if public_id:
            refs.append((public_id, self.resource_type))
        if self.record_type.has_gallery:
            refs.extend((image.public_id, IMAGE.resource_type) for image in record.images)
        return refs

    def _fresh_refs(self, uploaded: Optional[UploadedMedia], gallery_uploads: Sequence[UploadedMedia]) -> List[MediaRef]:
        refs = [(uploaded.public_id, self.resource_type)] if uploaded is not None else []
        refs.extend((item.public_id, IMAGE.resource_type) for item in gallery_uploads)
        return refs

    def _commit(self, db: Session, fresh: Sequence[MediaRef] = ()) -> None:
        """Commit, or roll back and destroy the files uploaded for this request."""
        try:
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Saving {self.record_type.slug} record failed: {exc}")
            for ref in fresh:
                self._discard_media(*ref)
            raise PersistenceException(f"Failed to save {self.record_type.label.lower()}") from exc

    def _discard_media(self, public_id: str, resource_type: str = "image") -> None:
        try:
            self.media_store.destroy(public_id, resource_type=resource_type)
        except MediaStoreError as exc:
            logger.warning(f"Failed to delete media {public_id}: {exc}")
        else:
            logger.info(f"Deleted media {public_id}")
