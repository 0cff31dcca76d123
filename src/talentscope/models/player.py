"""Directory entries searched by scouts."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Experience(str, Enum):
    AMATEUR = "Amateur"
    SEMI_PRO = "Semi-Pro"
    PRO = "Pro"


class PlayerRecord(BaseModel):
    """Read-only candidate record seeded into the directory."""

    id: str = Field(..., min_length=1)
    name: str
    role: str
    strengths: List[str]
    last_thirty_day_form: str
    summary: str
    game: str
    region: str
    experience: Experience
    availability: bool
    clutch_percentage: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    entry_style: Optional[str] = None
    utility_usage: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def searchable_text(self) -> List[str]:
        return [self.name, self.role, self.summary, *self.strengths]
