"""
In-memory cache of the seasons, tournaments and teams the filters are built from.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from .models import Season, Team, Tournament

LOGGER = logging.getLogger(__name__)


class ReferenceSource(Protocol):
    def list_seasons(self, *, use_cache: bool = True) -> List[Season]: ...

    def list_tournaments(self, *, use_cache: bool = True) -> List[Tournament]: ...

    def list_teams(self, *, use_cache: bool = True) -> List[Team]: ...


def derive_years(seasons: Iterable[Season]) -> List[int]:
    """
    Collect every start year and every end year that is present, without duplicates.
    """
    years: Dict[int, None] = {}
    for season in seasons:
        years.setdefault(season.start_year, None)
        if season.end_year:
            years.setdefault(season.end_year, None)
    return list(years)


class ReferenceData:
    """
    Seasons, tournaments, teams and the derived year set.

    Contents are swapped in only after all three fetches succeed, so a
    failed reload never exposes a partial cache.
    """

    def __init__(self) -> None:
        self.seasons: List[Season] = []
        self.tournaments: List[Tournament] = []
        self.teams: List[Team] = []
        self.years: List[int] = []
        self.ready = False
        self._tournament_names: Dict[int, str] = {}

    def load(self, source: ReferenceSource, *, use_cache: bool = True) -> None:
        """
        Fetch all reference collections; APIClientError propagates untouched.

        ``use_cache=False`` bypasses the on-disk payload cache and refreshes it.
        """
        seasons = source.list_seasons(use_cache=use_cache)
        tournaments = source.list_tournaments(use_cache=use_cache)
        teams = source.list_teams(use_cache=use_cache)
        self.replace(seasons, tournaments, teams)
        LOGGER.info(
            "Reference data ready: %s seasons, %s tournaments, %s teams, %s years",
            len(self.seasons),
            len(self.tournaments),
            len(self.teams),
            len(self.years),
        )

    def replace(
        self,
        seasons: Iterable[Season],
        tournaments: Iterable[Tournament],
        teams: Iterable[Team],
    ) -> None:
        self.seasons = list(seasons)
        self.tournaments = list(tournaments)
        self.teams = list(teams)
        self.years = derive_years(self.seasons)
        self._tournament_names = {}
        for tournament in self.tournaments:
            self._tournament_names.setdefault(tournament.id, tournament.name)
        self.ready = True

    def tournament_name(self, tournament_id: int) -> Optional[str]:
        return self._tournament_names.get(tournament_id)
