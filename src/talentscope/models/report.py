"""Performance report records and the per-user report state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ReportStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"


class Report(BaseModel):
    id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    overall_rating: float = Field(..., ge=0.0, le=10.0)
    role_fit: str
    strengths: List[str]
    areas_to_improve: List[str]
    consistency_score: int = Field(..., ge=0, le=100)
    recent_form: str
    status: ReportStatus = ReportStatus.READY
    created_at: datetime

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class Pending:
    """No report has been generated yet; ``eta`` is advisory."""

    eta: str

    @property
    def status(self) -> ReportStatus:
        return ReportStatus.PENDING


@dataclass(frozen=True)
class Ready:
    report: Report

    @property
    def status(self) -> ReportStatus:
        return ReportStatus.READY


ReportState = Union[Pending, Ready]


class ProviderAuthorization(BaseModel):
    user_id: str
    providers: List[str]
    authorized_at: datetime

    model_config = ConfigDict(frozen=True)
