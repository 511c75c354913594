"""
Customs validation service

Classifies an HSN code against a destination country by combining the
item's intrinsic risk (HSN catalog) with the destination's import policy
(country restriction table), and aggregates results across a shipment.
"""
import logging
from typing import Any, Dict, Iterable, Mapping, Union

from ..models.hsn_code import HSNEntry
from ..schemas.validation import (
    IssueSeverity,
    IssueType,
    ShipmentItem,
    ValidationIssue,
    ValidationResult,
    ValidationStatus,
    ValidationSummary,
)
from .country_restrictions import CountryRestrictionTable
from .hsn_catalog import HSNCatalog

logger = logging.getLogger(__name__)

# invalid never takes part in escalation; it short-circuits validation
_STATUS_RANK = {
    ValidationStatus.VALID: 0,
    ValidationStatus.RESTRICTED: 1,
    ValidationStatus.PROHIBITED: 2,
}

BLOCKING_STATUSES = frozenset({ValidationStatus.PROHIBITED, ValidationStatus.INVALID})


def _escalate(current: ValidationStatus, candidate: ValidationStatus) -> ValidationStatus:
    if _STATUS_RANK[candidate] > _STATUS_RANK[current]:
        return candidate
    return current


class CustomsValidationService:
    """Service for validating shipment items against customs restrictions"""

    def __init__(self, catalog: HSNCatalog, country_table: CountryRestrictionTable):
        self.catalog = catalog
        self.country_table = country_table

    def validate(self, hsn_code: str, destination_country: str) -> ValidationResult:
        """
        Validate an HSN code for shipping to a destination country

        Args:
            hsn_code: 8-digit HSN code declared for the item
            destination_country: Destination country code (e.g. "AE")

        Returns:
            ValidationResult with the merged status and the issues in the
            order they were found
        """
        if not self.catalog.is_well_formed(hsn_code):
            logger.debug(f"Rejected malformed HSN code {hsn_code!r}")
            return ValidationResult(
                status=ValidationStatus.INVALID,
                hsn_code=hsn_code,
                hsn_info=None,
                issues=[ValidationIssue(
                    type=IssueType.ERROR,
                    severity=IssueSeverity.CRITICAL,
                    title="Invalid HSN Code Format",
                    message="HSN code must be exactly 8 digits",
                    recommendation="Please enter a valid 8-digit HSN code",
                )],
                can_proceed=False,
            )

        hsn_info = self.catalog.lookup(hsn_code)
        if hsn_info is None:
            # Uncatalogued codes are accepted as-is; destination rules are not consulted
            logger.debug(f"HSN code {hsn_code} not catalogued, accepting as general merchandise")
            return ValidationResult(
                status=ValidationStatus.VALID,
                hsn_code=hsn_code,
                hsn_info=HSNEntry.generic(hsn_code),
                issues=[ValidationIssue(
                    type=IssueType.INFO,
                    severity=IssueSeverity.LOW,
                    title="HSN Code Accepted",
                    message=f"HSN code {hsn_code} has been accepted for shipping",
                    recommendation="Standard customs clearance will apply",
                )],
                can_proceed=True,
            )

        issues = []
        status = ValidationStatus.VALID

        if hsn_info.globally_prohibited:
            status = _escalate(status, ValidationStatus.PROHIBITED)
            issues.append(ValidationIssue(
                type=IssueType.ERROR,
                severity=IssueSeverity.CRITICAL,
                title="Globally Prohibited Item",
                message=f"{hsn_info.description} is prohibited for international shipping",
                recommendation=hsn_info.restriction_reason or "This item cannot be shipped internationally",
            ))

        if hsn_info.globally_restricted and status != ValidationStatus.PROHIBITED:
            status = _escalate(status, ValidationStatus.RESTRICTED)
            issues.append(ValidationIssue(
                type=IssueType.WARNING,
                severity=IssueSeverity.HIGH,
                title="Restricted Item",
                message=f"{hsn_info.description} has shipping restrictions",
                recommendation=hsn_info.restriction_reason or "Special documentation may be required",
            ))

        if hsn_info.requires_license:
            issues.append(ValidationIssue(
                type=IssueType.WARNING,
                severity=IssueSeverity.HIGH,
                title="License Required",
                message=f"{hsn_info.description} requires an import/export license",
                recommendation="Ensure you have the necessary licenses before proceeding",
            ))

        country = self.country_table.lookup(destination_country)
        if country is not None:
            name = country.country_name

            if self.country_table.is_hsn_prohibited(hsn_code, destination_country):
                status = _escalate(status, ValidationStatus.PROHIBITED)
                issues.append(ValidationIssue(
                    type=IssueType.ERROR,
                    severity=IssueSeverity.CRITICAL,
                    title=f"Prohibited in {name}",
                    message=f"This item cannot be imported into {name}",
                    recommendation="Please remove this item or choose a different destination",
                ))

            if self.country_table.is_category_prohibited(hsn_info.category, destination_country):
                status = _escalate(status, ValidationStatus.PROHIBITED)
                issues.append(ValidationIssue(
                    type=IssueType.ERROR,
                    severity=IssueSeverity.CRITICAL,
                    title=f"Category Prohibited in {name}",
                    message=f"{hsn_info.category} items are prohibited in {name}",
                    recommendation="This category of items cannot be shipped to this destination",
                ))

            if (self.country_table.is_hsn_restricted(hsn_code, destination_country)
                    and status != ValidationStatus.PROHIBITED):
                status = _escalate(status, ValidationStatus.RESTRICTED)
                issues.append(ValidationIssue(
                    type=IssueType.WARNING,
                    severity=IssueSeverity.HIGH,
                    title=f"Restricted in {name}",
                    message=f"Additional documentation required for {name}",
                    recommendation="Import permit or special clearance may be needed",
                ))

            if (self.country_table.is_category_restricted(hsn_info.category, destination_country)
                    and status != ValidationStatus.PROHIBITED):
                status = _escalate(status, ValidationStatus.RESTRICTED)
                issues.append(ValidationIssue(
                    type=IssueType.WARNING,
                    severity=IssueSeverity.MEDIUM,
                    title=f"Category Restricted in {name}",
                    message=f"{hsn_info.category} items may require additional clearance",
                    recommendation="Check with customs for specific requirements",
                ))

            if country.special_notes:
                issues.append(ValidationIssue(
                    type=IssueType.INFO,
                    severity=IssueSeverity.LOW,
                    title=f"{name} Import Notes",
                    message=". ".join(country.special_notes),
                ))

        logger.debug(f"HSN code {hsn_code} to {destination_country}: {status.value} ({len(issues)} issues)")

        return ValidationResult(
            status=status,
            hsn_code=hsn_code,
            hsn_info=hsn_info,
            issues=issues,
            can_proceed=status != ValidationStatus.PROHIBITED,
        )

    def validate_batch(
        self,
        items: Iterable[Union[ShipmentItem, Mapping[str, Any]]],
        destination_country: str,
    ) -> Dict[str, ValidationResult]:
        """
        Validate every item of a shipment independently

        Results are keyed ``"{index}-{hsn_code}"`` so repeated codes never
        collide, and keep the order of ``items``.
        """
        results: Dict[str, ValidationResult] = {}
        for index, item in enumerate(items):
            if not isinstance(item, ShipmentItem):
                item = ShipmentItem.model_validate(item)
            results[f"{index}-{item.hsn_code}"] = self.validate(item.hsn_code, destination_country)

        logger.info(f"Validated {len(results)} items for destination {destination_country}")
        return results

    @staticmethod
    def has_blocking_issues(results: Mapping[str, ValidationResult]) -> bool:
        """True if any result blocks the shipment"""
        for result in results.values():
            if not result.can_proceed:
                return True
        return False

    @classmethod
    def summarize(cls, results: Mapping[str, ValidationResult]) -> ValidationSummary:
        counts = {status: 0 for status in ValidationStatus}
        for result in results.values():
            counts[result.status] += 1

        return ValidationSummary(
            total=len(results),
            valid=counts[ValidationStatus.VALID],
            restricted=counts[ValidationStatus.RESTRICTED],
            prohibited=counts[ValidationStatus.PROHIBITED],
            invalid=counts[ValidationStatus.INVALID],
            can_proceed=not cls.has_blocking_issues(results),
        )
