"""
Video links. The dashboard pastes a YouTube page URL; the site needs the
embed form, so links are normalised on the way in.
"""
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, Field, field_validator

from app.schemas.common import RecordForm, RecordOut


def to_embed_url(url: str) -> str:
    """
    https://www.youtube.com/watch?v=abc&t=5 → https://www.youtube.com/embed/abc
    https://youtu.be/abc                     → https://youtube.com/embed/abc
    Other hosts only lose their query string.
    """
    if url.startswith("http://"):
        url = "https://" + url[len("http://"):]
    if "youtube.com/watch?v=" in url:
        url = url.replace("watch?v=", "embed/")
    elif "youtu.be/" in url:
        url = url.replace("youtu.be/", "youtube.com/embed/")
    return url.split("?")[0].split("&")[0]


class VideoForm(RecordForm):
    title: Optional[str] = None
    description: Optional[str] = None
    video_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("video_url", "videoUrl"),
    )

    @field_validator("video_url")
    @classmethod
    def embed_form(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("video_url must be an http(s) URL")
        return to_embed_url(v)


class VideoOut(RecordOut):
    title: str
    description: Optional[str] = None
    video_url: str
    created_at: datetime
