"""
Translate filter and pagination state into a match list request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List
from urllib.parse import urlencode

from .filters import FilterState
from .pagination import PaginationState

ALL_MATCHES_PATH = "/all_matches"


@dataclass(frozen=True)
class MatchQuery:
    path: str
    params: Dict[str, Any]

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def target(self) -> str:
        return f"{self.path}?{self.query_string}"


def build_path(filters: FilterState) -> str:
    """
    Compose the request path.

    Segments appear in a fixed order (team, tournament, then season or year
    range) and only for filters that are set. A season wins over a year
    range.
    """
    if filters.has_no_filters():
        return ALL_MATCHES_PATH

    segments: List[str] = []
    if filters.team_id is not None:
        segments.append(f"teams/{filters.team_id}")
    if filters.tournament_id is not None:
        segments.append(f"tournaments/{filters.tournament_id}")
    if filters.season_id is not None:
        segments.append(f"seasons/{filters.season_id}")
    elif filters.from_year is not None:
        segments.append(f"years/{filters.from_year}")
        if filters.to_year is not None:
            segments.append(str(filters.to_year))
    return "/" + "/".join(segments)


def build_params(filters: FilterState, pagination: PaginationState) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "offset": pagination.offset,
        "per_page": int(pagination.per_page),
    }
    # home/away is meaningless without a team scope.
    if filters.team_id is not None:
        params["home_away"] = filters.home_away.value
    return params


def build_query(filters: FilterState, pagination: PaginationState) -> MatchQuery:
    return MatchQuery(path=build_path(filters), params=build_params(filters, pagination))
