# models/__init__.py
# Import all models here so that:
# 1. Alembic's env.py can import this single module and detect all tables.
# 2. SQLAlchemy relationship() calls resolve correctly (all classes in same metadata).

from app.models.user import User
from app.models.trip import Trip, Booking
from app.models.package import HajjPackage, UmrahPackage, DomesticPackage
from app.models.custom_pilgrimage import CustomPilgrimage
from app.models.why_choose_us import WhyChooseUsItem
from app.models.testimonial import Testimonial
from app.models.international_tour import InternationalTour, TourSliderImage
from app.models.umrah_service import UmrahService, UmrahServiceImage
from app.models.knowledge import KnowledgeDocument
from app.models.video import Video

__all__ = [
    "User",
    "Trip",
    "Booking",
    "HajjPackage",
    "UmrahPackage",
    "DomesticPackage",
    "CustomPilgrimage",
    "WhyChooseUsItem",
    "Testimonial",
    "InternationalTour",
    "TourSliderImage",
    "UmrahService",
    "UmrahServiceImage",
    "KnowledgeDocument",
    "Video",
]
