"""Scout-facing player search service."""

from __future__ import annotations

import logging
from typing import List, Optional

from talentscope.config import Settings
from talentscope.directory import PlayerDirectory
from talentscope.latency import Latency
from talentscope.models import PlayerRecord
from talentscope.results import ErrorKind, ServiceResult

from .failure import FailureStrategy, RandomFailure
from .filtering import SearchFilters, filter_players


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


class SearchEngine:
    def __init__(
        self,
        directory: PlayerDirectory,
        *,
        settings: Optional[Settings] = None,
        failure: Optional[FailureStrategy] = None,
    ):
        self._settings = settings or Settings()
        self._directory = directory
        self._failure = failure or RandomFailure(self._settings.search_failure_rate, seed=self._settings.seed)
        self._latency = Latency(self._settings)

    async def search(
        self,
        query: str = "",
        filters: Optional[SearchFilters] = None,
    ) -> ServiceResult[List[PlayerRecord]]:
        await self._latency.pause("search")
        if self._failure.should_fail():
            logger.warning("Search backend unavailable (query=%r)", query)
            return ServiceResult.fail(
                ErrorKind.SERVICE_UNAVAILABLE, "Search service temporarily unavailable"
            )
        results = filter_players(self._directory, query, filters)
        logger.info("Search %r matched %s of %s players", query, len(results), len(self._directory))
        return ServiceResult.ok(results)
