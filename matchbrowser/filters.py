"""
Filter selection state for the match list.

``season_id`` and ``from_year`` are mutually exclusive: selecting one clears
the other. ``home_away`` only affects queries that are scoped to a team.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .models import HomeAway


@dataclass
class FilterState:
    season_id: Optional[int] = None
    tournament_id: Optional[int] = None
    team_id: Optional[int] = None
    from_year: Optional[int] = None
    to_year: Optional[int] = None
    home_away: HomeAway = HomeAway.BOTH

    def select_season(self, season_id: int) -> None:
        self.season_id = season_id
        self.from_year = None
        self.to_year = None

    def deselect_season(self) -> None:
        self.season_id = None

    def select_from_year(self, year: int) -> None:
        self.from_year = year
        self.season_id = None

    def deselect_from_year(self) -> None:
        # Only the upper bound is dropped; from_year is owned by the selector.
        self.to_year = None

    def select_to_year(self, year: int) -> None:
        self.to_year = year
        self.season_id = None

    def deselect_to_year(self) -> None:
        self.to_year = None

    def select_tournament(self, tournament_id: int) -> None:
        self.tournament_id = tournament_id

    def deselect_tournament(self) -> None:
        self.tournament_id = None

    def select_team(self, team_id: int) -> None:
        self.team_id = team_id

    def deselect_team(self) -> None:
        self.team_id = None

    def select_home_away(self, value: Union[HomeAway, str]) -> None:
        self.home_away = HomeAway(value)

    def reset(self) -> None:
        self.season_id = None
        self.tournament_id = None
        self.team_id = None
        self.from_year = None
        self.to_year = None
        self.home_away = HomeAway.BOTH

    def has_no_filters(self) -> bool:
        """
        True when nothing narrows the match list.

        ``to_year`` and ``home_away`` are ignored: neither selects a path on
        its own.
        """
        return all(
            value is None
            for value in (self.season_id, self.tournament_id, self.team_id, self.from_year)
        )
