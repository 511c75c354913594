"""
Customs validation result schemas
"""
from enum import Enum
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field

from ..models.hsn_code import HSNEntry


class ValidationStatus(str, Enum):
    VALID = "valid"
    RESTRICTED = "restricted"
    PROHIBITED = "prohibited"
    INVALID = "invalid"


class IssueType(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueSeverity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ValidationIssue(BaseModel):
    """Single diagnostic produced while validating an item"""
    type: IssueType = Field(..., description="Issue type")
    severity: IssueSeverity = Field(..., description="Issue severity")
    title: str = Field(..., description="Short issue title")
    message: str = Field(..., description="Issue description")
    recommendation: Optional[str] = Field(None, description="Suggested next step")


class ValidationResult(BaseModel):
    """Outcome of validating one HSN code against a destination"""
    status: ValidationStatus = Field(..., description="Overall classification")
    hsn_code: str = Field(..., description="HSN code that was validated")
    hsn_info: Optional[HSNEntry] = Field(None, description="Resolved catalog entry, None when the code is malformed")
    issues: List[ValidationIssue] = Field(default_factory=list, description="Issues in discovery order")
    can_proceed: bool = Field(..., description="Whether the item may be shipped")


class ShipmentItem(BaseModel):
    """Item submitted for batch validation"""
    hsn_code: str = Field(
        ...,
        validation_alias=AliasChoices("hsn_code", "hsnCode"),
        description="HSN code declared for the item",
    )
    name: str = Field("", description="Item name as entered by the shipper")


class ValidationSummary(BaseModel):
    """Per-status counts across a batch of validation results"""
    total: int = Field(..., description="Number of validated items")
    valid: int = Field(0, description="Items with status valid")
    restricted: int = Field(0, description="Items with status restricted")
    prohibited: int = Field(0, description="Items with status prohibited")
    invalid: int = Field(0, description="Items with status invalid")
    can_proceed: bool = Field(..., description="True when no item blocks the shipment")
