"""Filter and query matching over directory records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from talentscope.models import Experience, PlayerRecord


@dataclass(frozen=True)
class SearchFilters:
    """Optional conjunctive filters; empty values are ignored."""

    game: str | None = None
    region: str | None = None
    experience: Experience | str | None = None
    availability: bool | None = None

    def is_empty(self) -> bool:
        return not self.game and not self.region and not self.experience and self.availability is None


def _experience_value(value: Experience | str) -> str:
    return value.value if isinstance(value, Experience) else value


def _passes_filters(record: PlayerRecord, filters: SearchFilters) -> bool:
    if filters.game and filters.game.lower() not in record.game.lower():
        return False
    if filters.region and filters.region.lower() not in record.region.lower():
        return False
    if filters.experience and record.experience.value != _experience_value(filters.experience):
        return False
    if filters.availability is not None and record.availability != filters.availability:
        return False
    return True


def _matches_query(record: PlayerRecord, lowered_query: str) -> bool:
    return any(lowered_query in text.lower() for text in record.searchable_text())


def filter_players(
    records: Iterable[PlayerRecord],
    query: str = "",
    filters: SearchFilters | None = None,
) -> List[PlayerRecord]:
    """Return records passing every filter and, for a non-empty query, matching it.

    The query matches when its lower-cased form is a substring of the name, role,
    summary or any strength. Input order is preserved.
    """
    filters = filters or SearchFilters()
    results = [record for record in records if _passes_filters(record, filters)]
    if query:
        lowered = query.lower()
        results = [record for record in results if _matches_query(record, lowered)]
    return results
