"""
Filterable, paginated match list client.
"""

from .cache import DataCache
from .clients.matches import MatchesClient
from .config import APISettings
from .exceptions import APIClientError, APINotFoundError, APIRateLimitError, ResponseFormatError
from .filters import FilterState
from .models import HomeAway, Match, PerPage, QueryResult, Score, Season, Team, Tournament
from .pagination import PaginationState
from .query import MatchQuery, build_query
from .reference import ReferenceData
from .store import MatchListState, MatchListStore

__all__ = [
    "APISettings",
    "DataCache",
    "APIClientError",
    "APINotFoundError",
    "APIRateLimitError",
    "ResponseFormatError",
    "FilterState",
    "HomeAway",
    "Match",
    "PerPage",
    "QueryResult",
    "Score",
    "Season",
    "Team",
    "Tournament",
    "PaginationState",
    "MatchQuery",
    "build_query",
    "ReferenceData",
    "MatchListState",
    "MatchListStore",
    "MatchesClient",
]

