"""
Database models
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
import enum
from database import Base


class MedicineType(str, enum.Enum):
    TABLET = "TABLET"
    CAPSULE = "CAPSULE"
    INJECTION = "INJECTION"
    SYRUP = "SYRUP"
    TOPICAL = "TOPICAL"
    DROPS = "DROPS"
    POWDER = "POWDER"
    INHALER = "INHALER"
    OTHER = "OTHER"


class Catalog(str, enum.Enum):
    BRANDED = "branded"
    GENERIC = "generic"

    @property
    def other(self) -> "Catalog":
        return Catalog.GENERIC if self is Catalog.BRANDED else Catalog.BRANDED

    @property
    def model(self):
        return BrandedMedicine if self is Catalog.BRANDED else GenericMedicine


class MedicineRecordMixin:
    """Columns shared by both catalogs; `name` is the upsert key"""
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    salt = Column(String, index=True)  # derived from contents, upper-cased
    contents = Column(String)
    type = Column(SQLEnum(MedicineType))
    packing = Column(String)
    ptr = Column(Float)  # price to retailer
    mrp = Column(Float)
    shipper_size = Column(Integer)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<{type(self).__name__} name={self.name!r} salt={self.salt!r} ptr={self.ptr!r}>"


class BrandedMedicine(MedicineRecordMixin, Base):
    __tablename__ = "branded_medicines"


class GenericMedicine(MedicineRecordMixin, Base):
    __tablename__ = "generic_medicines"
