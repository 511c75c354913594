"""
Reference data models
"""
from .hsn_code import HSNEntry, HSN_CODE_PATTERN
from .country_restriction import CountryRestrictionEntry
from .screening import ScreeningSeverity, ScreenedItem, CountryScreeningRules

__all__ = [
    "HSNEntry",
    "HSN_CODE_PATTERN",
    "CountryRestrictionEntry",
    "ScreeningSeverity",
    "ScreenedItem",
    "CountryScreeningRules",
]
