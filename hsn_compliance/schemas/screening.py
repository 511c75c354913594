"""
Item screening result schemas
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from ..models.screening import CountryScreeningRules, ScreenedItem


class ItemCheck(BaseModel):
    """Screening outcome for a single HSN code"""
    is_allowed: bool = Field(..., description="Whether the item may be shipped")
    restriction: Optional[ScreenedItem] = Field(None, description="Matching screening rule, if any")


class ScreeningIssue(BaseModel):
    """Disallowed item found while screening a shipment"""
    item_name: str
    hsn_code: str
    restriction: ScreenedItem


class ShipmentScreening(BaseModel):
    """Screening outcome for a whole shipment"""
    is_valid: bool = Field(..., description="True when no item is disallowed")
    issues: List[ScreeningIssue] = Field(default_factory=list)
    country_rules: Optional[CountryScreeningRules] = Field(None, description="Destination rules, if known")
