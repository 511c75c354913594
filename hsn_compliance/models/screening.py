"""
Item screening models for per-destination prohibited item lists
"""
import enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class ScreeningSeverity(str, enum.Enum):
    """How a screened item is treated at the destination"""
    PROHIBITED = "prohibited"
    RESTRICTED = "restricted"
    REQUIRES_LICENSE = "requires-license"


class ScreenedItem(BaseModel):
    """A specific HSN code called out by a screening list"""
    model_config = ConfigDict(frozen=True)

    hsn_code: str = Field(..., description="HSN code the rule applies to")
    item_name: str = Field(..., description="Human-readable item name")
    reason: str = Field(..., description="Why the item is screened")
    severity: ScreeningSeverity
    alternatives: Optional[str] = Field(None, description="Suggested alternative items")


class CountryScreeningRules(BaseModel):
    """Screening list and general restrictions for one destination"""
    model_config = ConfigDict(frozen=True)

    country_code: str
    country_name: str
    screened_items: Tuple[ScreenedItem, ...] = Field(default_factory=tuple)
    general_restrictions: Tuple[str, ...] = Field(default_factory=tuple)
