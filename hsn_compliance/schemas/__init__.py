"""
Pydantic schemas for validation results and API payloads
"""
from .validation import (
    ValidationStatus,
    IssueType,
    IssueSeverity,
    ValidationIssue,
    ValidationResult,
    ShipmentItem,
    ValidationSummary,
)
from .screening import ItemCheck, ScreeningIssue, ShipmentScreening

__all__ = [
    "ValidationStatus",
    "IssueType",
    "IssueSeverity",
    "ValidationIssue",
    "ValidationResult",
    "ShipmentItem",
    "ValidationSummary",
    "ItemCheck",
    "ScreeningIssue",
    "ShipmentScreening",
]
