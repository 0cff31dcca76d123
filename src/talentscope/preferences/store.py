"""Per-user sharing flag and connection-request records."""

from __future__ import annotations

import logging
from typing import Optional

from talentscope.config import Settings
from talentscope.latency import Latency
from talentscope.models import ConnectionRequest
from talentscope.persistence import KeyValueStore, get_json, set_json, sharing_key, talent_flag_key
from talentscope.results import ErrorKind, ServiceResult


logger = logging.getLogger("uvicorn.error")

DEFAULT_SHARING = True


class PreferenceStore:
    def __init__(self, store: KeyValueStore, *, settings: Optional[Settings] = None):
        self._store = store
        self._latency = Latency(settings or Settings())

    def get_sharing(self, user_id: str) -> bool:
        """Visible to scouts unless the user has opted out."""
        raw = self._store.get(sharing_key(user_id))
        if raw is None:
            return DEFAULT_SHARING
        return raw == "true"

    async def set_sharing(self, user_id: str, enabled: bool) -> ServiceResult[None]:
        await self._latency.pause("set_sharing")
        self._store.set(sharing_key(user_id), "true" if enabled else "false")
        logger.info("User %s sharing set to %s", user_id, enabled)
        return ServiceResult.ok()

    async def submit_connection_request(
        self,
        user_id: str,
        request: ConnectionRequest,
    ) -> ServiceResult[None]:
        await self._latency.pause("connection_request")
        missing = request.missing_fields()
        if missing:
            return ServiceResult.fail(
                ErrorKind.VALIDATION, f"Required fields missing: {', '.join(missing)}"
            )
        set_json(self._store, talent_flag_key(user_id), request.model_dump(mode="json"))
        logger.info("User %s submitted a connection request", user_id)
        return ServiceResult.ok()

    def connection_request(self, user_id: str) -> Optional[ConnectionRequest]:
        payload = get_json(self._store, talent_flag_key(user_id))
        if payload is None:
            return None
        return ConnectionRequest.model_validate(payload)

    def forget(self, user_id: str) -> None:
        self._store.delete(sharing_key(user_id))
        self._store.delete(talent_flag_key(user_id))
