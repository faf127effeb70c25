from app.schemas.common import (
    MessageResponse, ToggleActiveRequest, RecordForm, RecordOut, MediaRecordOut, GalleryImageOut,
)
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.user import UserCreateRequest, UserOut
from app.schemas.trip import (
    TripCreateRequest, TripOut, TripSummaryOut,
    BookingCreateRequest, BookingOut, BookingSummaryOut,
)
from app.schemas.contact import ContactRequest
from app.schemas.package import PackageForm, PackageOut
from app.schemas.custom_pilgrimage import CustomPilgrimageForm, CustomPilgrimageOut
from app.schemas.why_choose_us import WhyChooseUsForm, WhyChooseUsOut
from app.schemas.testimonial import TestimonialForm, TestimonialOut
from app.schemas.international_tour import InternationalTourForm, InternationalTourOut
from app.schemas.umrah_service import UmrahServiceForm, UmrahServiceOut
from app.schemas.knowledge import KnowledgeForm, KnowledgeOut
from app.schemas.video import VideoForm, VideoOut
