"""
Cloudinary service: upload and deletion of the files attached to dashboard records.

Each record type uploads into its own folder ("hajj-packages",
"knowledge_files", ...) with its own transformation. Cloudinary assigns the
public_id; we store it next to the secure_url so the object can be destroyed
when the record is deleted or its file replaced.

Images go up as resource_type "image"; PDFs as "raw". Destroy calls must
name the same resource_type or Cloudinary reports "not found".

Setup:
  1. Create a Cloudinary account at cloudinary.com
  2. Go to Dashboard → copy Cloud Name, API Key, API Secret
  3. Add to .env file
"""
import logging
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader
import httpx
from cloudinary.exceptions import Error as CloudinaryError

from app.config import settings
from app.core.exceptions import (
    MediaFetchException,
    PayloadTooLargeException,
    UploadException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Configure Cloudinary once at module level
cloudinary.config(
    cloud_name=settings.cloudinary_cloud_name,
    api_key=settings.cloudinary_api_key,
    api_secret=settings.cloudinary_api_secret,
    secure=True,   # always use HTTPS URLs
)


class MediaStoreError(Exception):
    """Raised when the media store fails to destroy an object."""


@dataclass(frozen=True)
class MediaKind:
    """What a record's file field accepts and how Cloudinary stores it."""
    resource_type: str      # Cloudinary resource_type
    accepted_type: str      # exact content type, or a prefix ending in "/"
    description: str        # "Only <description> files are accepted."
    noun: str               # "<An|A> <noun> is required ..."
    max_megabytes: int

    def accepts(self, content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        if self.accepted_type.endswith("/"):
            return content_type.startswith(self.accepted_type)
        return content_type == self.accepted_type

    @property
    def required_phrase(self) -> str:
        article = "An" if self.noun[:1].lower() in "aeiou" else "A"
        return f"{article} {self.noun}"


IMAGE = MediaKind(resource_type="image", accepted_type="image/", description="image", noun="image", max_megabytes=5)
PDF = MediaKind(resource_type="raw", accepted_type="application/pdf", description="PDF", noun="PDF file", max_megabytes=10)


@dataclass(frozen=True)
class MediaBlob:
    content: bytes
    content_type: str
    filename: Optional[str] = None


@dataclass(frozen=True)
class UploadedMedia:
    url: str
    public_id: str


def build_media_blob(
    content: bytes,
    content_type: Optional[str],
    filename: Optional[str] = None,
    kind: MediaKind = IMAGE,
) -> MediaBlob:
    """
    Validate an uploaded file before anything is sent to Cloudinary.
    Images: image/* up to 5 MB. PDFs: application/pdf up to 10 MB.
    """
    if not kind.accepts(content_type):
        raise ValidationException(f"Only {kind.description} files are accepted.")
    if len(content) > kind.max_megabytes * 1024 * 1024:
        raise PayloadTooLargeException(kind.max_megabytes)
    return MediaBlob(content=content, content_type=content_type, filename=filename)


class CloudinaryMediaStore:
    """
    Media store backed by the Cloudinary SDK.
    Both calls are blocking network requests; callers run them off the event loop.
    """

    def upload(
        self,
        blob: MediaBlob,
        folder: str,
        transformation: Optional[list] = None,
        resource_type: str = "image",
    ) -> UploadedMedia:
        options = {"folder": folder, "resource_type": resource_type}
        if transformation:
            options["transformation"] = transformation
        try:
            result = cloudinary.uploader.upload(blob.content, **options)
        except CloudinaryError as exc:
            logger.error(f"Cloudinary upload failed: folder={folder}, error={exc}")
            raise UploadException("Image upload failed" if resource_type == "image" else "File upload failed") from exc
        return UploadedMedia(url=result["secure_url"], public_id=result["public_id"])

    def destroy(self, public_id: str, resource_type: str = "image") -> None:
        try:
            result = cloudinary.uploader.destroy(public_id, resource_type=resource_type, invalidate=True)
        except CloudinaryError as exc:
            raise MediaStoreError(str(exc)) from exc
        # "not found" means there is nothing left to clean up
        if result.get("result") not in ("ok", "not found"):
            raise MediaStoreError(f"unexpected destroy result: {result.get('result')}")


async def fetch_media(url: str) -> bytes:
    """
    Download a stored file so it can be served as an attachment.
    Raises MediaFetchException (502) when Cloudinary cannot deliver it.
    """
    try:
        async with httpx.AsyncClient(timeout=30.0, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error(f"Fetching stored file failed: url={url}, error={exc}")
        raise MediaFetchException() from exc
    return response.content
