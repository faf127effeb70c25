"""
Record type registry.

The dashboards differ only in their columns, their form fields, what kind of
file they carry (an image, a PDF, or nothing) and whether they own a gallery.
Each one is described here once and served by the same PackageRecordManager
and router factory.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Type

from app.models.package import HajjPackage, UmrahPackage, DomesticPackage
from app.models.custom_pilgrimage import CustomPilgrimage
from app.models.why_choose_us import WhyChooseUsItem
from app.models.testimonial import Testimonial
from app.models.international_tour import InternationalTour, TourSliderImage
from app.models.umrah_service import UmrahService, UmrahServiceImage
from app.models.knowledge import KnowledgeDocument
from app.models.video import Video
from app.schemas.common import RecordForm, RecordOut
from app.schemas.package import PackageForm, PackageOut
from app.schemas.custom_pilgrimage import CustomPilgrimageForm, CustomPilgrimageOut
from app.schemas.why_choose_us import WhyChooseUsForm, WhyChooseUsOut
from app.schemas.testimonial import TestimonialForm, TestimonialOut
from app.schemas.international_tour import InternationalTourForm, InternationalTourOut
from app.schemas.umrah_service import UmrahServiceForm, UmrahServiceOut
from app.schemas.knowledge import KnowledgeForm, KnowledgeOut
from app.schemas.video import VideoForm, VideoOut
from app.services.cloudinary_service import IMAGE, PDF, MediaKind


@dataclass(frozen=True)
class RecordType:
    slug: str                       # URL segment under /api
    label: str                      # used in messages: "<label> not found"
    model: type
    form_schema: Type[RecordForm]
    out_schema: Type[RecordOut]
    required_fields: Tuple[str, ...]
    folder: Optional[str] = None    # Cloudinary folder
    file_field: str = "file"        # multipart field carrying the file
    transformation: Optional[list] = None
    requires_media: bool = True
    categorized: bool = False
    category_exclusive: bool = False
    media_kind: Optional[MediaKind] = IMAGE     # None: the record has no file
    url_field: str = "image_url"
    gallery_model: Optional[type] = None        # child table with url/public_id/position
    gallery_field: Optional[str] = None         # multipart field, repeated once per image
    gallery_folder: Optional[str] = None
    gallery_limit: int = 10
    downloadable: bool = False
    required_message: Optional[str] = None

    @property
    def has_gallery(self) -> bool:
        return self.gallery_model is not None

    @property
    def missing_fields_message(self) -> str:
        if self.required_message:
            return self.required_message
        fields = [f.replace("_", " ") for f in self.required_fields]
        if len(fields) == 1:
            return f"{fields[0].capitalize()} is required"
        joined = ", ".join(fields[:-1]) + f" and {fields[-1]}"
        return f"{joined[:1].upper()}{joined[1:]} are required"

    @property
    def media_required_message(self) -> str:
        return f"{self.media_kind.required_phrase} is required for a new {self.label.lower()}."


HAJJ = RecordType(
    slug="hajj",
    label="Package",
    model=HajjPackage,
    form_schema=PackageForm,
    out_schema=PackageOut,
    required_fields=("title", "price", "category"),
    folder="hajj-packages",
    transformation=[{"width": 400, "height": 600, "crop": "fill"}],
    categorized=True,
)

UMRAH = RecordType(
    slug="umrah",
    label="Package",
    model=UmrahPackage,
    form_schema=PackageForm,
    out_schema=PackageOut,
    required_fields=("title", "price", "category"),
    folder="umrah-packages",
    transformation=[{"width": 400, "height": 600, "crop": "fill"}],
    categorized=True,
    category_exclusive=True,
)

DOMESTIC = RecordType(
    slug="domestic",
    label="Package",
    model=DomesticPackage,
    form_schema=PackageForm,
    out_schema=PackageOut,
    required_fields=("title", "price", "category"),
    folder="domestic-packages",
    transformation=[{"width": 800, "height": 600, "crop": "fill", "gravity": "center"}],
    categorized=True,
    category_exclusive=True,
)

CUSTOM_PILGRIMAGE = RecordType(
    slug="custom-pilgrimage",
    label="Entry",
    model=CustomPilgrimage,
    form_schema=CustomPilgrimageForm,
    out_schema=CustomPilgrimageOut,
    required_fields=("title", "subtitle1", "subtitle2", "subtitle3", "subtitle4"),
    folder="custom-pilgrimage",
    file_field="heroImage",
)

WHY_CHOOSE_US = RecordType(
    slug="why-choose-us",
    label="Item",
    model=WhyChooseUsItem,
    form_schema=WhyChooseUsForm,
    out_schema=WhyChooseUsOut,
    required_fields=("title", "description"),
    folder="why_choose_us",
    file_field="imageFile",
)

TESTIMONIALS = RecordType(
    slug="testimonials",
    label="Testimonial",
    model=Testimonial,
    form_schema=TestimonialForm,
    out_schema=TestimonialOut,
    required_fields=("name", "title", "description", "rating"),
    folder="testimonials",
    file_field="image",
)

INTERNATIONAL_TOUR = RecordType(
    slug="international-tour",
    label="Tour",
    model=InternationalTour,
    form_schema=InternationalTourForm,
    out_schema=InternationalTourOut,
    required_fields=("title", "description"),
    folder="international-tours/backgrounds",
    file_field="backgroundImage",
    transformation=[{"crop": "fill"}],
    gallery_model=TourSliderImage,
    gallery_field="sliderImages",
    gallery_folder="international-tours/sliders",
)

UMRAH_SERVICE = RecordType(
    slug="umrah-service",
    label="Service",
    model=UmrahService,
    form_schema=UmrahServiceForm,
    out_schema=UmrahServiceOut,
    required_fields=("title", "description"),
    folder="umrah-services/hero",
    file_field="heroImage",
    gallery_model=UmrahServiceImage,
    gallery_field="serviceImages",
    gallery_folder="umrah-services/gallery",
)

KNOWLEDGE = RecordType(
    slug="knowledge",
    label="Document",
    model=KnowledgeDocument,
    form_schema=KnowledgeForm,
    out_schema=KnowledgeOut,
    required_fields=("title", "description"),
    folder="knowledge_files",
    media_kind=PDF,
    url_field="file_url",
    downloadable=True,
)

VIDEOS = RecordType(
    slug="videos",
    label="Video",
    model=Video,
    form_schema=VideoForm,
    out_schema=VideoOut,
    required_fields=("title", "video_url"),
    media_kind=None,
    requires_media=False,
    required_message="Title and video URL are required",
)

RECORD_TYPES = (
    HAJJ,
    UMRAH,
    DOMESTIC,
    CUSTOM_PILGRIMAGE,
    WHY_CHOOSE_US,
    TESTIMONIALS,
    INTERNATIONAL_TOUR,
    UMRAH_SERVICE,
    KNOWLEDGE,
    VIDEOS,
)
