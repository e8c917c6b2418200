"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel
from typing import Optional, List
from models import MedicineType


# Medicine Schemas
class MedicineRecordResponse(BaseModel):
    name: str
    salt: Optional[str] = None
    contents: Optional[str] = None
    type: Optional[MedicineType] = None
    packing: Optional[str] = None
    ptr: Optional[float] = None
    mrp: Optional[float] = None
    shipper_size: Optional[int] = None

    class Config:
        from_attributes = True


class CounterpartResponse(MedicineRecordResponse):
    savings: Optional[str] = None


class MatchInfo(BaseModel):
    strategy: str
    score: float


# Search Schemas
class BrandedSearchResponse(BaseModel):
    branded: MedicineRecordResponse
    match: MatchInfo
    generics: List[CounterpartResponse]
    total_generics: int


class GenericSearchResponse(BaseModel):
    generic: MedicineRecordResponse
    match: MatchInfo
    branded_alternatives: List[CounterpartResponse]
    total_branded: int


class SaltSearchResponse(BaseModel):
    salt: str
    generics: List[MedicineRecordResponse]
    branded: List[MedicineRecordResponse]
    total_results: int


# Upload Schemas
class UploadStats(BaseModel):
    created: int
    updated: int
    total: int


class UploadResponse(BaseModel):
    success: bool
    message: str
    stats: UploadStats
