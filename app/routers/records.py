"""
Dashboard router factory.

Every record type gets the same four endpoints under /api/<slug>:
  GET    /api/<slug>          → all records, newest first (?category=, ?is_active=)
  POST   /api/<slug>          → multipart form or JSON; creates, or updates when "id" is present
  PATCH  /api/<slug>          → {id, is_active}; flips the active flag
  DELETE /api/<slug>?id=...   → deletes the record and its files
Downloadable types also get:
  GET    /api/<slug>/{id}/download → the stored file as an attachment

GET is public (the website reads it). Everything else requires the admin token.
"""
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from app.database import get_db
from app.core.dependencies import get_current_admin, get_media_store
from app.core.exceptions import NotFoundException, ValidationException
from app.schemas.common import MessageResponse, RecordForm, ToggleActiveRequest, validation_message
from app.services import cloudinary_service
from app.services.cloudinary_service import IMAGE, MediaBlob, MediaKind, build_media_blob
from app.services.record_service import PackageRecordManager
from app.services.record_types import RecordType


def parse_form(schema, form_data) -> RecordForm:
    """Validate the text fields of a form or JSON body; 400 on the first problem."""
    fields = {key: value for key, value in form_data.items() if not isinstance(value, UploadFile)}
    try:
        return schema.model_validate(fields)
    except ValidationError as exc:
        raise ValidationException(validation_message(exc))


async def read_payload(request: Request):
    """JSON objects are accepted alongside multipart forms. JSON bodies carry no files."""
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationException("Request body must be valid JSON")
        if not isinstance(payload, dict):
            raise ValidationException("Request body must be a JSON object")
        return payload, False
    return await request.form(), True


async def read_media(upload, kind: MediaKind = IMAGE) -> Optional[MediaBlob]:
    """An absent, textual or zero-byte file field means no new file."""
    if not isinstance(upload, UploadFile):
        return None
    content = await upload.read()
    if not content:
        return None
    return build_media_blob(content, upload.content_type, upload.filename, kind)


async def read_gallery(uploads) -> List[MediaBlob]:
    """Every non-empty file sent under the gallery field, in order."""
    gallery = []
    for upload in uploads:
        blob = await read_media(upload)
        if blob is not None:
            gallery.append(blob)
    return gallery


def attachment_name(title: str) -> str:
    safe = re.sub(r"[^\w\- ]", "", title or "").strip()
    return f"{safe or 'document'}.pdf"


def build_record_router(record_type: RecordType) -> APIRouter:
    router = APIRouter()
    out_schema = record_type.out_schema

    def get_manager(media_store=Depends(get_media_store)) -> PackageRecordManager:
        return PackageRecordManager(record_type, media_store)

    @router.get("", response_model=List[out_schema])
    def list_records(
        category: Optional[str] = Query(None, description="Only this category (categorized types)"),
        is_active: Optional[bool] = Query(None),
        db: Session = Depends(get_db),
        manager: PackageRecordManager = Depends(get_manager),
    ):
        return manager.list_records(db, category=category, is_active=is_active)

    @router.post("", response_model=out_schema)
    async def save_record(
        request: Request,
        response: Response,
        db: Session = Depends(get_db),
        manager: PackageRecordManager = Depends(get_manager),
        admin: dict = Depends(get_current_admin),
    ):
        """
        Create or update. Presence of "id" in the body selects update.
        The file is read from the record type's file field, gallery images
        from its gallery field (repeated once per image).
        """
        payload, is_form = await read_payload(request)
        form = parse_form(record_type.form_schema, payload)

        media = None
        gallery = []
        if is_form and record_type.media_kind is not None:
            media = await read_media(payload.get(record_type.file_field), record_type.media_kind)
        if is_form and record_type.has_gallery:
            gallery = await read_gallery(payload.getlist(record_type.gallery_field))

        record_id = payload.get("id")
        record_id = str(record_id).strip() if record_id is not None and not isinstance(record_id, UploadFile) else ""

        # Session and Cloudinary calls block; keep them off the event loop
        if record_id:
            return await run_in_threadpool(manager.update, db, record_id, form, media, gallery)

        record = await run_in_threadpool(manager.create, db, form, media, gallery)
        response.status_code = status.HTTP_201_CREATED
        return record

    @router.patch("", response_model=out_schema)
    def toggle_active(
        body: ToggleActiveRequest,
        db: Session = Depends(get_db),
        manager: PackageRecordManager = Depends(get_manager),
        admin: dict = Depends(get_current_admin),
    ):
        return manager.toggle_active(db, body.id, body.is_active)

    @router.delete("", response_model=MessageResponse)
    def delete_record(
        id: Optional[str] = Query(None),
        db: Session = Depends(get_db),
        manager: PackageRecordManager = Depends(get_manager),
        admin: dict = Depends(get_current_admin),
    ):
        if not id:
            raise ValidationException("ID is required")
        manager.delete(db, id)
        return {"message": f"{record_type.label} deleted successfully"}

    if record_type.downloadable:
        @router.get("/{record_id}/download")
        async def download_file(
            record_id: str,
            db: Session = Depends(get_db),
            manager: PackageRecordManager = Depends(get_manager),
        ):
            """Stream the stored PDF back with a filename taken from the title."""
            record = await run_in_threadpool(manager.get, db, record_id)
            url = getattr(record, record_type.url_field)
            if not url:
                raise NotFoundException("File")
            content = await cloudinary_service.fetch_media(url)
            return Response(
                content=content,
                media_type="application/pdf",
                headers={"Content-Disposition": f'attachment; filename="{attachment_name(record.title)}"'},
            )

    return router
