"""
Item screening service

Checks declared HSN codes against explicit screening lists: a global list
of items no courier shipment may carry, and per-destination lists of
items that are prohibited, restricted or need a license there.
"""
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..models.screening import CountryScreeningRules, ScreenedItem, ScreeningSeverity
from ..schemas.screening import ItemCheck, ScreeningIssue, ShipmentScreening
from ..schemas.validation import ShipmentItem

logger = logging.getLogger(__name__)


class ItemScreeningTable:
    """Immutable global and per-destination screening lists"""

    def __init__(
        self,
        global_prohibited: Iterable[ScreenedItem],
        countries: Iterable[CountryScreeningRules],
    ):
        self.global_prohibited: Tuple[ScreenedItem, ...] = tuple(global_prohibited)
        table: Dict[str, CountryScreeningRules] = {}
        for rules in countries:
            if rules.country_code in table:
                raise ValueError(f"Duplicate country in screening table: {rules.country_code}")
            table[rules.country_code] = rules
        self._countries = MappingProxyType(table)
        logger.info(
            f"Item screening table initialized with {len(self.global_prohibited)} global items "
            f"and {len(table)} countries"
        )

    def country_rules(self, country_code: str) -> Optional[CountryScreeningRules]:
        return self._countries.get(country_code)

    def check_item(self, hsn_code: str, country_code: str) -> ItemCheck:
        """
        Screen one HSN code for a destination

        The global list is consulted first and always disallows. A match on
        the destination list disallows only when its severity is prohibited.
        """
        for item in self.global_prohibited:
            if item.hsn_code == hsn_code:
                return ItemCheck(is_allowed=False, restriction=item)

        rules = self.country_rules(country_code)
        if rules:
            for item in rules.screened_items:
                if item.hsn_code == hsn_code:
                    return ItemCheck(
                        is_allowed=item.severity != ScreeningSeverity.PROHIBITED,
                        restriction=item,
                    )

        return ItemCheck(is_allowed=True)

    def screen_shipment(
        self,
        items: Iterable[Union[ShipmentItem, Mapping[str, Any]]],
        country_code: str,
    ) -> ShipmentScreening:
        issues = []
        for item in items:
            if not isinstance(item, ShipmentItem):
                item = ShipmentItem.model_validate(item)
            check = self.check_item(item.hsn_code, country_code)
            if not check.is_allowed and check.restriction:
                issues.append(ScreeningIssue(
                    item_name=item.name,
                    hsn_code=item.hsn_code,
                    restriction=check.restriction,
                ))

        if issues:
            logger.info(f"Screening for {country_code} blocked {len(issues)} items")

        return ShipmentScreening(
            is_valid=len(issues) == 0,
            issues=issues,
            country_rules=self.country_rules(country_code),
        )
