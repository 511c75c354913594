"""
Pydantic schemas for customs validation API endpoints
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from ..core.config import settings
from ..models.country_restriction import CountryRestrictionEntry
from ..models.hsn_code import HSNEntry
from .screening import ShipmentScreening
from .validation import ShipmentItem, ValidationResult, ValidationSummary


def _normalize_country(v):
    # applied before the length constraints
    if isinstance(v, str):
        return v.strip().upper()
    return v


class ValidateRequest(BaseModel):
    """API request schema for single item validation"""
    hsn_code: str = Field(
        ...,
        description="HSN code declared for the item",
        examples=["61091000"],
    )
    destination_country: str = Field(
        ...,
        min_length=2,
        max_length=3,
        description="Destination country code",
        examples=["US"],
    )

    @field_validator("destination_country", mode="before")
    def normalize_country(cls, v):
        return _normalize_country(v)


class ShipmentRequest(BaseModel):
    """API request schema for shipment-wide validation and screening"""
    items: List[ShipmentItem] = Field(..., min_length=1, description="Items in the shipment")
    destination_country: str = Field(
        ...,
        min_length=2,
        max_length=3,
        description="Destination country code",
    )

    @field_validator("items")
    def validate_batch_size(cls, v):
        if len(v) > settings.MAX_BATCH_ITEMS:
            raise ValueError(f"Batch size {len(v)} exceeds limit of {settings.MAX_BATCH_ITEMS}")
        return v

    @field_validator("destination_country", mode="before")
    def normalize_country(cls, v):
        return _normalize_country(v)


class ValidateResponse(BaseModel):
    """API response schema for single item validation"""
    success: bool = Field(..., description="Whether validation ran")
    data: ValidationResult = Field(..., description="Validation result")
    processing_time_ms: float = Field(..., description="API processing time in milliseconds")


class BatchValidateResponse(BaseModel):
    """API response schema for shipment validation"""
    success: bool = Field(..., description="Whether validation ran")
    data: Dict[str, ValidationResult] = Field(..., description="Results keyed by '{index}-{hsn_code}'")
    summary: ValidationSummary = Field(..., description="Per-status counts")
    has_blocking_issues: bool = Field(..., description="True when at least one item blocks the shipment")
    processing_time_ms: float = Field(..., description="API processing time in milliseconds")


class ScreeningResponse(BaseModel):
    """API response schema for shipment screening"""
    success: bool = Field(..., description="Whether screening ran")
    data: ShipmentScreening = Field(..., description="Screening result")
    processing_time_ms: float = Field(..., description="API processing time in milliseconds")


class HSNSearchResponse(BaseModel):
    """API response schema for HSN search"""
    query: str = Field(..., description="Original search query")
    category: Optional[str] = Field(None, description="Category filter, if any")
    total_results: int = Field(..., description="Number of matches before the limit was applied")
    data: List[HSNEntry] = Field(default_factory=list, description="Matching catalog entries")


class CategoryListResponse(BaseModel):
    categories: List[str]


class CountrySummary(BaseModel):
    country_code: str
    country_name: str


class CountryListResponse(BaseModel):
    countries: List[CountrySummary]


class CountryRestrictionResponse(BaseModel):
    data: CountryRestrictionEntry
