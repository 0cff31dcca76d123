"""Scout shortlists and contact requests."""

from __future__ import annotations

import logging
from typing import List, Optional

from talentscope.config import Settings
from talentscope.directory import PlayerDirectory
from talentscope.latency import Latency
from talentscope.models import ContactRequest, PlayerRecord
from talentscope.persistence import (
    KeyValueStore,
    contact_request_key,
    get_json,
    saved_players_key,
    set_json,
)
from talentscope.results import ErrorKind, ServiceResult


logger = logging.getLogger("uvicorn.error")


class Shortlist:
    def __init__(self, store: KeyValueStore, directory: PlayerDirectory, *, settings: Optional[Settings] = None):
        self._store = store
        self._directory = directory
        self._latency = Latency(settings or Settings())

    def _saved_ids(self, scout_id: str) -> List[str]:
        return list(get_json(self._store, saved_players_key(scout_id)) or [])

    async def save_player(self, scout_id: str, player_id: str) -> ServiceResult[None]:
        await self._latency.pause("save_player")
        if self._directory.get(player_id) is None:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, f"Player {player_id} not found")
        saved = self._saved_ids(scout_id)
        if player_id not in saved:
            saved.append(player_id)
            set_json(self._store, saved_players_key(scout_id), saved)
            logger.info("Scout %s saved player %s", scout_id, player_id)
        return ServiceResult.ok()

    def saved_players(self, scout_id: str) -> List[PlayerRecord]:
        records = (self._directory.get(player_id) for player_id in self._saved_ids(scout_id))
        return [record for record in records if record is not None]

    async def request_contact(self, scout_id: str, player_id: str, message: str) -> ServiceResult[None]:
        await self._latency.pause("request_contact")
        if self._directory.get(player_id) is None:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, f"Player {player_id} not found")
        if not message.strip():
            return ServiceResult.fail(ErrorKind.VALIDATION, "A message is required to request contact")
        request = ContactRequest(scout_id=scout_id, player_id=player_id, message=message.strip())
        set_json(self._store, contact_request_key(scout_id, player_id), request.model_dump(mode="json"))
        logger.info("Scout %s requested contact with player %s", scout_id, player_id)
        return ServiceResult.ok()

    def clear(self, scout_id: str) -> None:
        self._store.delete(saved_players_key(scout_id))
        for key in self._store.keys(contact_request_key(scout_id, "")):
            self._store.delete(key)
