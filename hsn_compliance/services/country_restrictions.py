"""
Country restriction table service
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from ..models.country_restriction import CountryRestrictionEntry

logger = logging.getLogger(__name__)


class CountryRestrictionTable:
    """
    Immutable per-destination import policy table

    A country missing from the table has no known destination-specific
    restrictions; every predicate answers False for it.
    """

    def __init__(self, entries: Iterable[CountryRestrictionEntry]):
        table: Dict[str, CountryRestrictionEntry] = {}
        for entry in entries:
            if entry.country_code in table:
                raise ValueError(f"Duplicate country in restriction table: {entry.country_code}")
            table[entry.country_code] = entry
        self._entries = MappingProxyType(table)
        logger.info(f"Country restriction table initialized with {len(table)} countries")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, country_code) -> bool:
        return country_code in self._entries

    def lookup(self, country_code: str) -> Optional[CountryRestrictionEntry]:
        return self._entries.get(country_code)

    def country_codes(self) -> List[str]:
        return list(self._entries.keys())

    def entries(self) -> List[CountryRestrictionEntry]:
        return list(self._entries.values())

    def is_hsn_prohibited(self, hsn_code: str, country_code: str) -> bool:
        restrictions = self.lookup(country_code)
        if not restrictions:
            return False
        return hsn_code in restrictions.prohibited_hsn_codes

    def is_hsn_restricted(self, hsn_code: str, country_code: str) -> bool:
        restrictions = self.lookup(country_code)
        if not restrictions:
            return False
        return hsn_code in restrictions.restricted_hsn_codes

    def is_category_prohibited(self, category: str, country_code: str) -> bool:
        restrictions = self.lookup(country_code)
        if not restrictions:
            return False
        return category in restrictions.prohibited_categories

    def is_category_restricted(self, category: str, country_code: str) -> bool:
        restrictions = self.lookup(country_code)
        if not restrictions:
            return False
        return category in restrictions.restricted_categories
