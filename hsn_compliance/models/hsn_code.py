"""
HSN code reference models
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


HSN_CODE_PATTERN = r"^[0-9]{8}$"


class HSNEntry(BaseModel):
    """Commodity classification entry from the HSN catalog"""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., pattern=HSN_CODE_PATTERN, description="8-digit HSN code")
    description: str = Field(..., description="Commodity description")
    category: str = Field(..., description="Coarse commodity grouping")
    requires_license: bool = Field(False, description="Import/export license required regardless of destination")
    globally_prohibited: bool = Field(False, description="Never shippable internationally")
    globally_restricted: bool = Field(False, description="Extra documentation required everywhere")
    restriction_reason: Optional[str] = Field(None, description="Why the item is prohibited or restricted")
    common_names: Tuple[str, ...] = Field(default_factory=tuple, description="Synonyms used for free-text search")

    @field_validator("common_names", mode="before")
    def dedupe_common_names(cls, v):
        if v is None:
            return ()
        seen = []
        for name in v:
            if name not in seen:
                seen.append(name)
        return tuple(seen)

    @classmethod
    def generic(cls, code: str) -> "HSNEntry":
        """Placeholder entry for a well-formed code missing from the catalog"""
        return cls(
            code=code,
            description="General merchandise",
            category="General",
            requires_license=False,
            globally_prohibited=False,
            globally_restricted=False,
            common_names=(),
        )
