from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from talentscope.models import Experience, PlayerRecord


class SearchRequest(BaseModel):
    query: str = ""
    game: str | None = None
    region: str | None = None
    experience: Experience | None = None
    availability: bool | None = None


class SearchResponse(BaseModel):
    players: List[PlayerRecord]
    total: int


class FacetsResponse(BaseModel):
    games: List[str]
    regions: List[str]
    experience: List[str]


class SavePlayerRequest(BaseModel):
    player_id: str = Field(..., min_length=1)


class ContactRequestPayload(BaseModel):
    player_id: str = Field(..., min_length=1)
    message: str = ""
