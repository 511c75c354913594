"""
Customs validation API endpoints
"""
import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from hsn_compliance.core.config import settings
from hsn_compliance.middleware.rate_limit import limiter
from hsn_compliance.models.hsn_code import HSNEntry
from hsn_compliance.services.country_restrictions import CountryRestrictionTable
from hsn_compliance.services.hsn_catalog import HSNCatalog
from hsn_compliance.services.item_screening import ItemScreeningTable
from hsn_compliance.services.validation_service import CustomsValidationService
from hsn_compliance.services.reference_data import (
    get_country_restrictions,
    get_hsn_catalog,
    get_item_screening,
    get_validation_service,
)
from hsn_compliance.schemas.customs import (
    BatchValidateResponse,
    CategoryListResponse,
    CountryListResponse,
    CountryRestrictionResponse,
    CountrySummary,
    HSNSearchResponse,
    ScreeningResponse,
    ShipmentRequest,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hsn/search", response_model=HSNSearchResponse)
@limiter.limit(settings.SEARCH_RATE_LIMIT)
async def search_hsn_codes(
    request: Request,
    query: str = Query(..., min_length=1, max_length=200, description="Free-text search term"),
    category: Optional[str] = Query(None, description="Restrict results to one category"),
    limit: int = Query(20, ge=1, le=100, description="Maximum number of results to return"),
    catalog: HSNCatalog = Depends(get_hsn_catalog),
):
    """
    Search the HSN catalog by description and common names.

    Args:
        query: Search term, matched case-insensitively as a substring
        category: Optional category filter
        limit: Maximum number of entries returned

    Returns:
        Matching catalog entries in catalog order
    """
    matches = catalog.search_by_free_text(query)
    if category:
        matches = [entry for entry in matches if entry.category == category]

    logger.info(f"HSN search '{query[:50]}' (category={category}) returned {len(matches)} matches")

    return HSNSearchResponse(
        query=query,
        category=category,
        total_results=len(matches),
        data=matches[:limit],
    )


@router.get("/hsn/categories", response_model=CategoryListResponse)
async def list_hsn_categories(catalog: HSNCatalog = Depends(get_hsn_catalog)):
    """List the distinct commodity categories in the catalog"""
    return CategoryListResponse(categories=catalog.categories())


@router.get("/hsn/{code}", response_model=HSNEntry)
async def get_hsn_code(code: str, catalog: HSNCatalog = Depends(get_hsn_catalog)):
    """
    Get a single HSN catalog entry.

    Raises:
        HTTPException: 400 for a malformed code, 404 when the code is not catalogued
    """
    if not catalog.is_well_formed(code):
        logger.warning(f"Rejected lookup of malformed HSN code {code!r}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="HSN code must be exactly 8 digits"
        )

    entry = catalog.lookup(code)
    if entry is None:
        logger.warning(f"HSN code {code} not found in catalog")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"HSN code {code} not found in catalog"
        )
    return entry


@router.get("/countries", response_model=CountryListResponse)
async def list_countries(country_table: CountryRestrictionTable = Depends(get_country_restrictions)):
    """List destinations with known import restrictions"""
    return CountryListResponse(countries=[
        CountrySummary(country_code=entry.country_code, country_name=entry.country_name)
        for entry in country_table.entries()
    ])


@router.get("/countries/{country_code}", response_model=CountryRestrictionResponse)
async def get_country_restriction(
    country_code: str,
    country_table: CountryRestrictionTable = Depends(get_country_restrictions),
):
    """Get the import policy for one destination country"""
    entry = country_table.lookup(country_code.strip().upper())
    if entry is None:
        logger.warning(f"No import restrictions recorded for {country_code}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No import restrictions recorded for {country_code}"
        )
    return CountryRestrictionResponse(data=entry)


@router.post("/validate", response_model=ValidateResponse)
@limiter.limit(settings.VALIDATE_RATE_LIMIT)
async def validate_item(
    request: Request,
    validate_request: ValidateRequest,
    service: CustomsValidationService = Depends(get_validation_service),
):
    """
    Validate one HSN code against a destination country.

    A blocked item is a normal outcome: the response is 200 with
    ``can_proceed`` false, never an HTTP error.
    """
    start_time = time.time()

    try:
        result = service.validate(validate_request.hsn_code, validate_request.destination_country)
    except Exception as e:
        logger.error(f"Validation failed for HSN code {validate_request.hsn_code}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to validate HSN code. Please try again later."
        )

    processing_time = (time.time() - start_time) * 1000

    logger.info(f"Validated HSN code {validate_request.hsn_code} for {validate_request.destination_country}: "
                f"{result.status.value}")

    return ValidateResponse(
        success=True,
        data=result,
        processing_time_ms=processing_time
    )


@router.post("/validate-batch", response_model=BatchValidateResponse)
@limiter.limit(settings.BATCH_RATE_LIMIT)
async def validate_shipment(
    request: Request,
    shipment_request: ShipmentRequest,
    service: CustomsValidationService = Depends(get_validation_service),
):
    """
    Validate every item of a shipment against a destination country.

    Returns:
        Per-item results keyed by "{index}-{hsn_code}", a status summary and
        whether the shipment is blocked
    """
    start_time = time.time()

    try:
        results = service.validate_batch(shipment_request.items, shipment_request.destination_country)
        summary = service.summarize(results)
    except Exception as e:
        logger.error(f"Batch validation failed for {shipment_request.destination_country}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to validate shipment. Please try again later."
        )

    processing_time = (time.time() - start_time) * 1000

    logger.info(f"Batch validation for {shipment_request.destination_country}: "
                f"{summary.valid} valid, {summary.restricted} restricted, "
                f"{summary.prohibited} prohibited, {summary.invalid} invalid")

    return BatchValidateResponse(
        success=True,
        data=results,
        summary=summary,
        has_blocking_issues=not summary.can_proceed,
        processing_time_ms=processing_time
    )


@router.post("/screen", response_model=ScreeningResponse)
@limiter.limit(settings.BATCH_RATE_LIMIT)
async def screen_shipment(
    request: Request,
    shipment_request: ShipmentRequest,
    screening: ItemScreeningTable = Depends(get_item_screening),
):
    """Screen shipment items against the global and destination screening lists"""
    start_time = time.time()

    try:
        result = screening.screen_shipment(shipment_request.items, shipment_request.destination_country)
    except Exception as e:
        logger.error(f"Screening failed for {shipment_request.destination_country}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to screen shipment. Please try again later."
        )

    processing_time = (time.time() - start_time) * 1000

    return ScreeningResponse(
        success=True,
        data=result,
        processing_time_ms=processing_time
    )
