"""Authenticated identity held by the session store."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Role(str, Enum):
    SCOUT = "scout"
    PLAYER = "player"


class Identity(BaseModel):
    """Single active user bound to a client context."""

    id: str = Field(..., min_length=1)
    username: str
    email: str
    region: str
    primary_games: List[str] = Field(default_factory=list)
    discord_id: Optional[str] = None
    steam_id: Optional[str] = None
    game_id: Optional[str] = None
    role: Optional[Role] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("primary_games")
    @classmethod
    def _unique_games(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))


class RegistrationInput(BaseModel):
    username: str
    email: str
    password: str
    confirm_password: str
    region: str
    primary_games: List[str] = Field(default_factory=list)
    discord_id: Optional[str] = None
    steam_id: Optional[str] = None
    game_id: Optional[str] = None
    agree_to_terms: bool = False


class ProfileUpdate(BaseModel):
    """Editable profile fields; ``None`` leaves the current value untouched."""

    username: Optional[str] = None
    email: Optional[str] = None
    region: Optional[str] = None
    primary_games: Optional[List[str]] = None
    discord_id: Optional[str] = None
    steam_id: Optional[str] = None
    game_id: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
