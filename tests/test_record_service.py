"""
PackageRecordManager against an in-memory database and a fake media store.
"""
import uuid

import pytest

from app.core.exceptions import NotFoundException, UploadException, ValidationException
from app.models.package import DomesticPackage, HajjPackage
from app.schemas.package import PackageForm
from app.schemas.why_choose_us import WhyChooseUsForm
from app.services.record_service import PackageRecordManager
from app.services.record_types import DOMESTIC, HAJJ, UMRAH, WHY_CHOOSE_US


def package_form(**fields):
    return PackageForm.model_validate(fields)


@pytest.fixture
def domestic(media_store):
    return PackageRecordManager(DOMESTIC, media_store)


@pytest.fixture
def hajj(media_store):
    return PackageRecordManager(HAJJ, media_store)


class TestCreate:
    def test_create_stores_media_reference(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="Hajj Basic", price="1500", category="economic"), image)

        assert record.category == "Economic"
        assert record.price == 1500
        assert record.is_active is True
        assert record.image_url.startswith("https://res.cloudinary.com/")
        assert record.public_id == media_store.uploads[0]["public_id"]
        assert media_store.uploads[0]["folder"] == "hajj-packages"
        assert media_store.uploads[0]["transformation"] == [{"width": 400, "height": 600, "crop": "fill"}]

    def test_exclusive_category_replaces_previous_record(self, db_session, domestic, media_store, image):
        first = domestic.create(db_session, package_form(title="Domestic v1", price=10, category="Economic"), image)
        first_public_id = first.public_id

        domestic.create(db_session, package_form(title="Domestic v2", price=12, category="Economic"), image)

        economic = domestic.list_records(db_session, category="Economic")
        assert [r.title for r in economic] == ["Domestic v2"]
        assert media_store.destroyed == [first_public_id]

    def test_exclusive_category_leaves_other_categories_alone(self, db_session, domestic, image):
        domestic.create(db_session, package_form(title="Cheap", price=10, category="Economic"), image)
        domestic.create(db_session, package_form(title="Fancy", price=99, category="Premium"), image)

        assert len(domestic.list_records(db_session)) == 2

    def test_non_exclusive_category_keeps_both(self, db_session, hajj, media_store, image):
        hajj.create(db_session, package_form(title="A", price=10, category="Economic"), image)
        hajj.create(db_session, package_form(title="B", price=11, category="Economic"), image)

        assert len(hajj.list_records(db_session, category="economic")) == 2
        assert media_store.destroyed == []

    def test_missing_fields_rejected_before_upload(self, db_session, domestic, media_store, image):
        with pytest.raises(ValidationException) as exc_info:
            domestic.create(db_session, package_form(title="", price=10), image)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Title, price and category are required"
        assert media_store.uploads == []
        assert db_session.query(DomesticPackage).count() == 0

    def test_image_required_on_create(self, db_session, hajj, media_store):
        with pytest.raises(ValidationException):
            hajj.create(db_session, package_form(title="A", price=10, category="Standard"))

        assert media_store.uploads == []

    def test_failed_upload_keeps_existing_category_record(self, db_session, media_store, image):
        umrah = PackageRecordManager(UMRAH, media_store)
        umrah.create(db_session, package_form(title="Umrah v1", price=10, category="Standard"), image)

        media_store.fail_upload = True
        with pytest.raises(UploadException):
            umrah.create(db_session, package_form(title="Umrah v2", price=12, category="Standard"), image)

        assert [r.title for r in umrah.list_records(db_session)] == ["Umrah v1"]
        assert media_store.destroyed == []

    def test_destroy_failure_does_not_fail_replacement(self, db_session, domestic, media_store, image):
        domestic.create(db_session, package_form(title="Old", price=10, category="Standard"), image)
        media_store.fail_destroy = True

        record = domestic.create(db_session, package_form(title="New", price=11, category="Standard"), image)

        assert record.title == "New"
        assert len(media_store.destroyed) == 1

    def test_is_active_from_form(self, db_session, media_store, image):
        manager = PackageRecordManager(WHY_CHOOSE_US, media_store)
        form = WhyChooseUsForm.model_validate({"title": "Guides", "description": "Experienced", "isActive": "false"})

        record = manager.create(db_session, form, image)

        assert record.is_active is False


class TestList:
    def test_newest_first(self, db_session, hajj, image):
        for title in ("first", "second", "third"):
            hajj.create(db_session, package_form(title=title, price=10, category="Standard"), image)

        assert [r.title for r in hajj.list_records(db_session)] == ["third", "second", "first"]

    def test_filter_by_active_flag(self, db_session, hajj, image):
        kept = hajj.create(db_session, package_form(title="on", price=10, category="Standard"), image)
        hidden = hajj.create(db_session, package_form(title="off", price=10, category="Standard"), image)
        hajj.toggle_active(db_session, hidden.id, False)

        assert [r.id for r in hajj.list_records(db_session, is_active=True)] == [kept.id]


class TestUpdate:
    def test_update_without_media_keeps_image(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="Before", price=10, category="Premium"), image)
        url = record.image_url

        updated = hajj.update(db_session, str(record.id), package_form(title="After"))

        assert updated.title == "After"
        assert updated.price == 10
        assert updated.image_url == url
        assert len(media_store.uploads) == 1
        assert media_store.destroyed == []

    def test_update_with_media_replaces_and_destroys_old(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="A", price=10, category="Premium"), image)
        old_public_id = record.public_id

        updated = hajj.update(db_session, record.id, package_form(price=20), image)

        assert updated.public_id != old_public_id
        assert media_store.destroyed == [old_public_id]

    def test_category_cannot_change(self, db_session, domestic, image):
        record = domestic.create(db_session, package_form(title="A", price=10, category="Premium"), image)

        with pytest.raises(ValidationException) as exc_info:
            domestic.update(db_session, record.id, package_form(category="Economic"))

        assert exc_info.value.detail == "category cannot be changed"

    def test_same_category_is_allowed(self, db_session, domestic, image):
        record = domestic.create(db_session, package_form(title="A", price=10, category="Premium"), image)

        updated = domestic.update(db_session, record.id, package_form(title="B", category="premium"))

        assert updated.title == "B"

    def test_update_missing_record(self, db_session, hajj):
        with pytest.raises(NotFoundException) as exc_info:
            hajj.update(db_session, uuid.uuid4(), package_form(title="X"))

        assert exc_info.value.detail == "Package not found"


class TestToggleAndDelete:
    def test_toggle_changes_only_is_active(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="A", price=10, category="Standard"), image)
        before = (record.title, record.price, record.category, record.image_url, record.public_id)

        toggled = hajj.toggle_active(db_session, record.id, False)

        assert toggled.is_active is False
        assert (toggled.title, toggled.price, toggled.category, toggled.image_url, toggled.public_id) == before
        assert len(media_store.uploads) == 1

    def test_toggle_requires_boolean(self, db_session, hajj, image):
        record = hajj.create(db_session, package_form(title="A", price=10, category="Standard"), image)

        with pytest.raises(ValidationException):
            hajj.toggle_active(db_session, record.id, None)

    def test_delete_removes_row_and_media(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="A", price=10, category="Standard"), image)
        public_id = record.public_id

        hajj.delete(db_session, record.id)

        assert db_session.query(HajjPackage).count() == 0
        assert media_store.destroyed == [public_id]

    def test_delete_survives_destroy_failure(self, db_session, hajj, media_store, image):
        record = hajj.create(db_session, package_form(title="A", price=10, category="Standard"), image)
        media_store.fail_destroy = True

        hajj.delete(db_session, record.id)

        assert db_session.query(HajjPackage).count() == 0

    def test_delete_missing_record_changes_nothing(self, db_session, hajj, image):
        hajj.create(db_session, package_form(title="A", price=10, category="Standard"), image)

        with pytest.raises(NotFoundException):
            hajj.delete(db_session, uuid.uuid4())
        with pytest.raises(NotFoundException):
            hajj.delete(db_session, "not-a-uuid")

        assert db_session.query(HajjPackage).count() == 1
