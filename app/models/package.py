from app.database import Base
from app.models.mixins import PricedPackageMixin


class HajjPackage(PricedPackageMixin, Base):
    """
    Hajj packages. Several packages may share a category;
    the dashboard lists them all newest-first.
    """
    __tablename__ = "hajj_packages"


class UmrahPackage(PricedPackageMixin, Base):
    """
    Umrah packages. At most one package per category:
    creating a new one replaces whatever was there.
    """
    __tablename__ = "umrah_packages"


class DomesticPackage(PricedPackageMixin, Base):
    """Domestic tour packages. One package per category, like Umrah."""
    __tablename__ = "domestic_packages"
