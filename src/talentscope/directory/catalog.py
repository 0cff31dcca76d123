"""Seeded catalog of candidate player records."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from talentscope.models import Experience, PlayerRecord


_SEED_PLAYERS: Tuple[PlayerRecord, ...] = (
    PlayerRecord(
        id="1",
        name="ShadowStrike",
        role="Entry Fragger",
        strengths=["Aggressive positioning", "High first-kill rate", "Map control"],
        last_thirty_day_form="Excellent",
        summary="Consistent entry fragger with exceptional aim and game sense. Strong team communication in CS:GO.",
        game="CS:GO",
        region="Europe",
        experience=Experience.SEMI_PRO,
        availability=True,
        clutch_percentage=78,
        entry_style="Aggressive",
    ),
    PlayerRecord(
        id="2",
        name="UtilityMaster",
        role="Support",
        strengths=["Smoke timing", "Flash coordination", "Team utility"],
        last_thirty_day_form="Good",
        summary="Strategic support player with deep understanding of CS:GO utility usage and team coordination.",
        game="CS:GO",
        region="North America",
        experience=Experience.PRO,
        availability=False,
        utility_usage="Expert",
    ),
    PlayerRecord(
        id="3",
        name="ClutchKing",
        role="Rifler",
        strengths=["Clutch situations", "Positioning", "Game sense"],
        last_thirty_day_form="Outstanding",
        summary="Reliable rifler with exceptional clutch percentage and strategic thinking in CS:GO.",
        game="CS:GO",
        region="Asia",
        experience=Experience.SEMI_PRO,
        availability=True,
        clutch_percentage=85,
    ),
    PlayerRecord(
        id="4",
        name="AWPMaster",
        role="AWPer",
        strengths=["Long range precision", "Map awareness", "Economic management"],
        last_thirty_day_form="Excellent",
        summary="Elite AWPer with incredible precision and game-changing potential in clutch rounds.",
        game="CS:GO",
        region="Europe",
        experience=Experience.PRO,
        availability=True,
        clutch_percentage=72,
        entry_style="Passive",
    ),
    PlayerRecord(
        id="5",
        name="IGL_Commander",
        role="In-Game Leader",
        strengths=["Strategic calling", "Team coordination", "Anti-stratting"],
        last_thirty_day_form="Good",
        summary="Experienced IGL with strong tactical knowledge and team leadership in competitive CS:GO.",
        game="CS:GO",
        region="North America",
        experience=Experience.PRO,
        availability=False,
        utility_usage="Advanced",
    ),
)


class PlayerDirectory:
    """Read-only, ordered collection of player records."""

    def __init__(self, records: Optional[Iterable[PlayerRecord]] = None):
        self._records: Tuple[PlayerRecord, ...] = tuple(_SEED_PLAYERS if records is None else records)
        self._by_id: Dict[str, PlayerRecord] = {record.id: record for record in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError("Directory records must have unique ids")

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> List[PlayerRecord]:
        return list(self._records)

    def get(self, player_id: str) -> Optional[PlayerRecord]:
        return self._by_id.get(player_id)

    def facets(self) -> Dict[str, Sequence[str]]:
        """Distinct filter values in directory order."""
        games = list(dict.fromkeys(record.game for record in self._records))
        regions = list(dict.fromkeys(record.region for record in self._records))
        return {
            "games": games,
            "regions": regions,
            "experience": [level.value for level in Experience],
        }


def default_directory() -> PlayerDirectory:
    return PlayerDirectory()
