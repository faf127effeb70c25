"""
Root conftest.py: env vars, in-memory database and a fake media store.

Settings are read at import time, so the environment is prepared before
anything from `app` is imported. Every test gets fresh tables in an
in-memory SQLite database and a fake media store in place of Cloudinary.
"""
import os

os.environ.update({
    "DATABASE_URI": "sqlite://",
    "SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
    "ADMIN_EMAIL": "admin@example.com",
    "ADMIN_PASSWORD": "admin-pass-123",
    "MAIL_USERNAME": "agency@example.com",
    "MAIL_PASSWORD": "mail-password",
    "MAIL_FROM": "agency@example.com",
    "CLOUDINARY_CLOUD_NAME": "test-cloud",
    "CLOUDINARY_API_KEY": "test-key",
    "CLOUDINARY_API_SECRET": "test-secret",
    "RECAPTCHA_SECRET_KEY": "recaptcha-secret",
    "RATE_LIMIT_ENABLED": "false",
})

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_media_store
from app.core.exceptions import UploadException
from app.database import Base, SessionLocal, engine, get_db
from app.main import app
from app.services.cloudinary_service import MediaBlob, MediaStoreError, UploadedMedia

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass-123"


class FakeMediaStore:
    """
    Records every upload/destroy; can be told to fail either call.
    fail_after=N lets the first N uploads succeed and fails the next one.
    """

    def __init__(self):
        self.uploads = []
        self.destroyed = []
        self.destroy_calls = []
        self.fail_upload = False
        self.fail_after = None
        self.fail_destroy = False

    def upload(self, blob, folder, transformation=None, resource_type="image"):
        if self.fail_upload or (self.fail_after is not None and len(self.uploads) >= self.fail_after):
            raise UploadException("Image upload failed")
        public_id = f"{folder}/img_{len(self.uploads) + 1}"
        self.uploads.append({
            "folder": folder,
            "transformation": transformation,
            "resource_type": resource_type,
            "public_id": public_id,
        })
        return UploadedMedia(
            url=f"https://res.cloudinary.com/test-cloud/{resource_type}/upload/{public_id}.jpg",
            public_id=public_id,
        )

    def destroy(self, public_id, resource_type="image"):
        self.destroyed.append(public_id)
        self.destroy_calls.append((public_id, resource_type))
        if self.fail_destroy:
            raise MediaStoreError("destroy failed")


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def media_store():
    return FakeMediaStore()


@pytest.fixture
def image():
    return MediaBlob(content=b"\xff\xd8\xff\xe0fake-jpeg", content_type="image/jpeg", filename="image.jpg")


@pytest.fixture
def client(media_store):
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_store] = lambda: media_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def jpeg_file():
    """Multipart file tuple for TestClient."""
    def _make(name="image.jpg", content_type="image/jpeg"):
        return (name, b"\xff\xd8\xff\xe0fake-jpeg", content_type)
    return _make


@pytest.fixture
def pdf_file():
    def _make(name="guide.pdf", content_type="application/pdf"):
        return (name, b"%PDF-1.4 fake-pdf", content_type)
    return _make
