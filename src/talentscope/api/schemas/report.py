from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from talentscope.models import ReportStatus


class AuthorizeRequest(BaseModel):
    provider_ids: List[str] = Field(default_factory=list)
    consent: bool = False


class ReportStatusResponse(BaseModel):
    status: ReportStatus
    eta: str | None = None


class SharingRequest(BaseModel):
    enabled: bool


class SharingResponse(BaseModel):
    user_id: str
    enabled: bool
