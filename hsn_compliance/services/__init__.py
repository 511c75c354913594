"""
Customs compliance services

- HSNCatalog: HSN code lookup and free-text search
- CountryRestrictionTable: destination import policy lookup
- CustomsValidationService: item and shipment classification
- ItemScreeningTable: explicit global and per-destination screening lists
- reference_data: loading of the tables and shared service instances
"""
from .hsn_catalog import HSNCatalog, is_well_formed
from .country_restrictions import CountryRestrictionTable
from .validation_service import CustomsValidationService, BLOCKING_STATUSES
from .item_screening import ItemScreeningTable
from .reference_data import (
    ReferenceDataError,
    load_hsn_catalog,
    load_hsn_catalog_csv,
    load_country_restrictions,
    load_item_screening,
    get_hsn_catalog,
    get_country_restrictions,
    get_item_screening,
    get_validation_service,
)

__all__ = [
    "HSNCatalog",
    "is_well_formed",
    "CountryRestrictionTable",
    "CustomsValidationService",
    "BLOCKING_STATUSES",
    "ItemScreeningTable",
    "ReferenceDataError",
    "load_hsn_catalog",
    "load_hsn_catalog_csv",
    "load_country_restrictions",
    "load_item_screening",
    "get_hsn_catalog",
    "get_country_restrictions",
    "get_item_screening",
    "get_validation_service",
]
