"""
Record types beyond a single image: tour and service galleries, knowledge
PDFs (raw uploads with a download endpoint) and video links.
"""
import asyncio
import uuid

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import MediaFetchException, PersistenceException, UploadException
from app.models.international_tour import InternationalTour, TourSliderImage
from app.schemas.international_tour import InternationalTourForm
from app.schemas.video import to_embed_url
from app.services import cloudinary_service
from app.services.record_service import PackageRecordManager
from app.services.record_types import INTERNATIONAL_TOUR

TOUR = {"title": "Istanbul & Cappadocia", "description": "Eight days across Turkey"}


def create_tour(client, headers, jpeg_file, sliders=2, background=True, **fields):
    files = [("sliderImages", jpeg_file(f"slide{i}.jpg")) for i in range(sliders)]
    if background:
        files.append(("backgroundImage", jpeg_file("bg.jpg")))
    return client.post("/api/international-tour", data={**TOUR, **fields}, files=files, headers=headers)


@pytest.fixture
def tours(media_store):
    return PackageRecordManager(INTERNATIONAL_TOUR, media_store)


class TestGalleryManager:
    def test_failed_gallery_upload_discards_earlier_uploads(self, db_session, tours, media_store, image):
        media_store.fail_after = 2

        with pytest.raises(UploadException):
            tours.create(db_session, InternationalTourForm(**TOUR), image, [image, image, image])

        assert media_store.destroyed == [upload["public_id"] for upload in media_store.uploads]
        assert len(media_store.destroyed) == 2
        assert db_session.query(InternationalTour).count() == 0

    def test_failed_commit_discards_fresh_uploads(self, db_session, tours, media_store, image, monkeypatch):
        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(PersistenceException):
            tours.create(db_session, InternationalTourForm(**TOUR), image, [image])

        assert sorted(media_store.destroyed) == sorted(upload["public_id"] for upload in media_store.uploads)
        assert len(media_store.destroyed) == 2

    def test_gallery_rows_keep_upload_order(self, db_session, tours, media_store, image):
        record = tours.create(db_session, InternationalTourForm(**TOUR), None, [image, image, image])

        assert [img.position for img in record.images] == [0, 1, 2]
        assert [img.public_id for img in record.images] == [u["public_id"] for u in media_store.uploads]
        assert record.image_url is None

    def test_replacing_gallery_removes_old_rows(self, db_session, tours, media_store, image):
        record = tours.create(db_session, InternationalTourForm(**TOUR), image, [image, image])
        old_slides = [img.public_id for img in record.images]

        tours.update(db_session, record.id, InternationalTourForm(), None, [image])

        assert db_session.query(TourSliderImage).count() == 1
        assert media_store.destroyed == old_slides


class TestInternationalTourRoutes:
    def test_create_with_background_and_sliders(self, client, admin_headers, jpeg_file, media_store):
        response = create_tour(client, admin_headers, jpeg_file)

        assert response.status_code == 201
        body = response.json()
        assert body["image_url"]
        assert len(body["images"]) == 2
        assert [u["folder"] for u in media_store.uploads] == [
            "international-tours/backgrounds",
            "international-tours/sliders",
            "international-tours/sliders",
        ]
        assert media_store.uploads[0]["transformation"] == [{"crop": "fill"}]

    def test_sliders_alone_are_enough(self, client, admin_headers, jpeg_file):
        response = create_tour(client, admin_headers, jpeg_file, sliders=1, background=False)

        assert response.status_code == 201
        assert response.json()["image_url"] is None

    def test_no_images_rejected(self, client, admin_headers, jpeg_file, media_store):
        response = create_tour(client, admin_headers, jpeg_file, sliders=0, background=False)

        assert response.status_code == 400
        assert response.json()["detail"] == "An image is required for a new tour."
        assert media_store.uploads == []

    def test_too_many_sliders_rejected(self, client, admin_headers, jpeg_file, media_store):
        response = create_tour(client, admin_headers, jpeg_file, sliders=11)

        assert response.status_code == 400
        assert response.json()["detail"] == "At most 10 gallery images are allowed"
        assert media_store.uploads == []

    def test_new_sliders_replace_old_ones(self, client, admin_headers, jpeg_file, media_store):
        created = create_tour(client, admin_headers, jpeg_file).json()
        old_slides = [img["public_id"] for img in created["images"]]

        response = client.post(
            "/api/international-tour",
            data={"id": created["id"]},
            files=[("sliderImages", jpeg_file())],
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["image_url"] == created["image_url"]
        assert len(body["images"]) == 1
        assert media_store.destroyed == old_slides

    def test_delete_destroys_background_and_sliders(self, client, admin_headers, jpeg_file, media_store):
        created = create_tour(client, admin_headers, jpeg_file).json()

        response = client.delete("/api/international-tour", params={"id": created["id"]}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Tour deleted successfully"}
        expected = [created["public_id"]] + [img["public_id"] for img in created["images"]]
        assert sorted(media_store.destroyed) == sorted(expected)


class TestUmrahServiceRoutes:
    def test_hero_and_gallery_are_independent(self, client, admin_headers, jpeg_file, media_store):
        created = client.post(
            "/api/umrah-service",
            data={"title": "Visa processing", "description": "Handled end to end"},
            files=[("serviceImages", jpeg_file()), ("serviceImages", jpeg_file())],
            headers=admin_headers,
        ).json()

        response = client.post(
            "/api/umrah-service",
            data={"id": created["id"]},
            files={"heroImage": jpeg_file()},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["image_url"]
        assert [img["public_id"] for img in body["images"]] == [img["public_id"] for img in created["images"]]
        assert media_store.uploads[-1]["folder"] == "umrah-services/hero"
        assert media_store.destroyed == []

    def test_missing_description(self, client, admin_headers, jpeg_file):
        response = client.post(
            "/api/umrah-service",
            data={"title": "Visa processing"},
            files={"heroImage": jpeg_file()},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Title and description are required"


class TestKnowledgeRoutes:
    def create_document(self, client, headers, pdf_file, title="Hajj Guide 2026!"):
        return client.post(
            "/api/knowledge",
            data={"title": title, "description": "Step by step rites"},
            files={"file": pdf_file()},
            headers=headers,
        )

    def test_pdf_uploaded_as_raw_resource(self, client, admin_headers, pdf_file, media_store):
        response = self.create_document(client, admin_headers, pdf_file)

        assert response.status_code == 201
        body = response.json()
        assert body["file_url"]
        assert media_store.uploads[0]["resource_type"] == "raw"
        assert media_store.uploads[0]["folder"] == "knowledge_files"

    def test_image_rejected(self, client, admin_headers, jpeg_file, media_store):
        response = client.post(
            "/api/knowledge",
            data={"title": "Guide", "description": "Rites"},
            files={"file": jpeg_file()},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Only PDF files are accepted."
        assert media_store.uploads == []

    def test_missing_file_rejected(self, client, admin_headers):
        response = client.post(
            "/api/knowledge",
            data={"title": "Guide", "description": "Rites"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "A PDF file is required for a new document."

    def test_delete_destroys_raw_resource(self, client, admin_headers, pdf_file, media_store):
        created = self.create_document(client, admin_headers, pdf_file).json()

        client.delete("/api/knowledge", params={"id": created["id"]}, headers=admin_headers)

        assert media_store.destroy_calls == [(created["public_id"], "raw")]

    def test_download_serves_attachment(self, client, admin_headers, pdf_file, monkeypatch):
        created = self.create_document(client, admin_headers, pdf_file).json()
        fetched = []

        async def fake_fetch(url):
            fetched.append(url)
            return b"%PDF-1.4 stored"

        monkeypatch.setattr(cloudinary_service, "fetch_media", fake_fetch)

        response = client.get(f"/api/knowledge/{created['id']}/download")

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4 stored"
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == 'attachment; filename="Hajj Guide 2026.pdf"'
        assert fetched == [created["file_url"]]

    def test_download_unknown_document(self, client):
        response = client.get(f"/api/knowledge/{uuid.uuid4()}/download")

        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"


class TestVideoRoutes:
    def test_json_create_stores_embed_url(self, client, admin_headers, media_store):
        response = client.post(
            "/api/videos",
            json={"title": "Tawaf explained", "videoUrl": "http://www.youtube.com/watch?v=abc123&t=5"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["video_url"] == "https://www.youtube.com/embed/abc123"
        assert media_store.uploads == []

    def test_missing_url_rejected(self, client, admin_headers):
        response = client.post("/api/videos", json={"title": "Tawaf explained"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Title and video URL are required"

    def test_non_http_url_rejected(self, client, admin_headers):
        response = client.post(
            "/api/videos",
            json={"title": "Tawaf explained", "video_url": "ftp://example.com/v.mp4"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "video_url must be an http(s) URL"

    def test_json_body_must_be_object(self, client, admin_headers):
        response = client.post("/api/videos", json=["Tawaf"], headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Request body must be a JSON object"

    def test_delete_touches_no_media(self, client, admin_headers, media_store):
        created = client.post(
            "/api/videos",
            json={"title": "Sa'i", "video_url": "https://youtu.be/xyz"},
            headers=admin_headers,
        ).json()

        response = client.delete("/api/videos", params={"id": created["id"]}, headers=admin_headers)

        assert response.status_code == 200
        assert media_store.destroy_calls == []


def test_short_links_become_embed_urls():
    assert to_embed_url("https://youtu.be/xyz?si=share") == "https://youtube.com/embed/xyz"
    assert to_embed_url("https://vimeo.com/123?autoplay=1") == "https://vimeo.com/123"


class TestFetchMedia:
    def mock_transport(self, monkeypatch, handler):
        real_client = httpx.AsyncClient

        def client_factory(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(cloudinary_service.httpx, "AsyncClient", client_factory)

    def test_returns_body(self, monkeypatch):
        self.mock_transport(monkeypatch, lambda request: httpx.Response(200, content=b"%PDF"))

        assert asyncio.run(cloudinary_service.fetch_media("https://res.cloudinary.com/x.pdf")) == b"%PDF"

    def test_missing_file_is_502(self, monkeypatch):
        self.mock_transport(monkeypatch, lambda request: httpx.Response(404))

        with pytest.raises(MediaFetchException) as exc_info:
            asyncio.run(cloudinary_service.fetch_media("https://res.cloudinary.com/x.pdf"))

        assert exc_info.value.status_code == 502
