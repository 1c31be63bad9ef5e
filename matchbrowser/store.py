"""
Match list store: owns filter, pagination and result state and sequences fetches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Union

from .clients.matches import MatchesClient
from .enrichment import add_tournament_names
from .exceptions import APIClientError
from .filters import FilterState
from .models import FilterOption, HomeAway, Match, PerPage, QueryResult
from .pagination import PaginationState
from .query import MatchQuery, build_query
from .reference import ReferenceData, ReferenceSource
from . import views

LOGGER = logging.getLogger(__name__)


class MatchSource(ReferenceSource, Protocol):
    def get_matches(self, path: str, params: Dict[str, Any]) -> QueryResult: ...


@dataclass
class MatchListState:
    """
    Everything the match browser mutates, in one place.

    ``request_seq`` is the number of the most recently issued match list
    request; responses carrying an older number are dropped.
    """

    filters: FilterState = field(default_factory=FilterState)
    pagination: PaginationState = field(default_factory=PaginationState)
    reference: ReferenceData = field(default_factory=ReferenceData)
    list: List[Match] = field(default_factory=list)
    total: int = 0
    is_loading: bool = False
    request_seq: int = 0


class MatchListStore:
    """
    Sequence reference data loading, query building, fetching and enrichment.

    Fetch failures are logged and absorbed; the previous ``list`` and
    ``total`` stay in place.
    """

    def __init__(
        self,
        client: Optional[MatchSource] = None,
        *,
        state: Optional[MatchListState] = None,
        per_page: Union[PerPage, int, None] = None,
    ):
        if client is None:
            client = MatchesClient()
            if per_page is None:
                per_page = client.settings.default_per_page
        self.client = client
        self.state = state or MatchListState()
        if per_page is not None:
            self.state.pagination.set_per_page(per_page)

    @property
    def filters(self) -> FilterState:
        return self.state.filters

    @property
    def pagination(self) -> PaginationState:
        return self.state.pagination

    @property
    def reference(self) -> ReferenceData:
        return self.state.reference

    def current_query(self) -> MatchQuery:
        return build_query(self.state.filters, self.state.pagination)

    def fetch_metadata(self, *, refresh: bool = False) -> bool:
        """
        Load reference data, then the first page of matches.

        ``refresh`` re-downloads seasons, tournaments and teams instead of
        reading the disk cache.
        """
        try:
            self.state.reference.load(self.client, use_cache=not refresh)
        except APIClientError as exc:
            LOGGER.error("Failed to load reference data: %s", exc)
            return False
        return self.fetch_matchlist()

    def fetch_matchlist(self) -> bool:
        """
        Fetch the page described by the current filters and pagination.

        Returns True when the response was applied.
        """
        self.state.request_seq += 1
        seq = self.state.request_seq
        query = self.current_query()
        self.state.is_loading = True
        LOGGER.debug("Request #%s: %s", seq, query.target)

        try:
            result = self.client.get_matches(query.path, query.params)
        except APIClientError as exc:
            LOGGER.error("Failed to fetch match list %s: %s", query.target, exc)
            if seq == self.state.request_seq:
                self.state.is_loading = False
            return False

        if seq != self.state.request_seq:
            LOGGER.debug(
                "Discarding stale response #%s, latest request is #%s",
                seq,
                self.state.request_seq,
            )
            return False

        self.state.list = add_tournament_names(result.list, self.state.reference)
        self.state.total = result.total
        self.state.pagination.update_total_pages(result.total)
        self.state.is_loading = False
        return True

    def reset_paginator_and_fetch(self) -> bool:
        self.state.pagination.reset()
        return self.fetch_matchlist()

    def on_select_season(self, season_id: int) -> bool:
        self.state.filters.select_season(season_id)
        return self.reset_paginator_and_fetch()

    def on_deselect_season(self) -> bool:
        self.state.filters.deselect_season()
        return self.reset_paginator_and_fetch()

    def on_select_from_year(self, year: int) -> bool:
        self.state.filters.select_from_year(year)
        return self.reset_paginator_and_fetch()

    def on_deselect_from_year(self) -> bool:
        self.state.filters.deselect_from_year()
        return self.reset_paginator_and_fetch()

    def on_select_to_year(self, year: int) -> bool:
        self.state.filters.select_to_year(year)
        return self.reset_paginator_and_fetch()

    def on_deselect_to_year(self) -> bool:
        self.state.filters.deselect_to_year()
        return self.reset_paginator_and_fetch()

    def on_select_tournament(self, tournament_id: int) -> bool:
        self.state.filters.select_tournament(tournament_id)
        return self.reset_paginator_and_fetch()

    def on_deselect_tournament(self) -> bool:
        self.state.filters.deselect_tournament()
        return self.reset_paginator_and_fetch()

    def on_select_team(self, team_id: int) -> bool:
        self.state.filters.select_team(team_id)
        return self.reset_paginator_and_fetch()

    def on_deselect_team(self) -> bool:
        self.state.filters.deselect_team()
        return self.reset_paginator_and_fetch()

    def on_select_home_away(self, value: Union[HomeAway, str]) -> bool:
        self.state.filters.select_home_away(value)
        return self.reset_paginator_and_fetch()

    def on_select_per_page(self, per_page: Union[PerPage, int]) -> bool:
        # Offset is kept; total_pages accounts for its phase.
        self.state.pagination.set_per_page(per_page)
        self.state.pagination.update_total_pages(self.state.total)
        return self.fetch_matchlist()

    def on_paginate_one(self, forward: bool) -> bool:
        return self.on_paginate_jump(forward, 1)

    def on_paginate_jump(self, forward: bool, multiplier: int) -> bool:
        pagination = self.state.pagination
        pagination.offset = pagination.normalize_offset(self.state.total, forward, multiplier)
        return self.fetch_matchlist()

    def reset_list(self) -> None:
        self.state.list = []
        self.state.total = 0

    @property
    def filter_seasons(self) -> List[FilterOption]:
        return views.season_options(self.state.reference)

    @property
    def filter_tournaments(self) -> List[FilterOption]:
        return views.tournament_options(self.state.reference)

    @property
    def filter_teams(self) -> List[FilterOption]:
        return views.team_options(self.state.reference)

    @property
    def filter_from_years(self) -> List[FilterOption]:
        return views.from_year_options(self.state.reference, self.state.filters)

    @property
    def filter_to_years(self) -> List[FilterOption]:
        return views.to_year_options(self.state.reference, self.state.filters)
