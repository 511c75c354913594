"""
Destination country import policy models
"""
from typing import FrozenSet, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer


class CountryRestrictionEntry(BaseModel):
    """Import policy for one destination country"""
    model_config = ConfigDict(frozen=True)

    country_code: str = Field(..., description="Destination key, usually ISO alpha-2")
    country_name: str = Field(..., description="Display name")
    prohibited_categories: FrozenSet[str] = Field(default_factory=frozenset)
    restricted_categories: FrozenSet[str] = Field(default_factory=frozenset)
    prohibited_hsn_codes: FrozenSet[str] = Field(default_factory=frozenset)
    restricted_hsn_codes: FrozenSet[str] = Field(default_factory=frozenset)
    special_notes: Tuple[str, ...] = Field(default_factory=tuple, description="Advisory notes shown to the shipper")

    @field_serializer(
        "prohibited_categories",
        "restricted_categories",
        "prohibited_hsn_codes",
        "restricted_hsn_codes",
    )
    def serialize_sets(self, value: FrozenSet[str]) -> List[str]:
        return sorted(value)
