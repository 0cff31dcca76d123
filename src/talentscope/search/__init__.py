"""Player search engine and scout shortlists."""

from .engine import SearchEngine
from .failure import AlwaysFail, FailureStrategy, NeverFail, RandomFailure
from .filtering import SearchFilters, filter_players
from .shortlist import Shortlist

__all__ = [
    "AlwaysFail",
    "FailureStrategy",
    "NeverFail",
    "RandomFailure",
    "SearchEngine",
    "SearchFilters",
    "Shortlist",
    "filter_players",
]
