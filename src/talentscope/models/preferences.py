from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class ConnectionRequest(BaseModel):
    """A player's expressed interest in scout outreach."""

    preferred_regions: List[str] = Field(default_factory=list)
    teams_of_interest: str = ""
    availability: str = ""
    contact_method: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("preferred_regions")
    @classmethod
    def _unique_regions(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(region.strip() for region in value if region.strip()))

    def missing_fields(self) -> List[str]:
        missing: List[str] = []
        if not self.preferred_regions:
            missing.append("preferred_regions")
        if not self.availability.strip():
            missing.append("availability")
        return missing


class ContactRequest(BaseModel):
    scout_id: str
    player_id: str
    message: str

    model_config = ConfigDict(frozen=True)
