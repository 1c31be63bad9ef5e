"""
Option lists for the filter selectors, computed from reference data and the current filters.
"""
from __future__ import annotations

from typing import List

from .filters import FilterState
from .models import FilterOption
from .reference import ReferenceData


def season_options(reference: ReferenceData) -> List[FilterOption]:
    return [FilterOption(label=season.label, value=season.id) for season in reference.seasons]


def tournament_options(reference: ReferenceData) -> List[FilterOption]:
    return [FilterOption(label=tour.name, value=tour.id) for tour in reference.tournaments]


def team_options(reference: ReferenceData) -> List[FilterOption]:
    return [FilterOption(label=team.name, value=team.id) for team in reference.teams]


def from_year_options(reference: ReferenceData, filters: FilterState) -> List[FilterOption]:
    """
    Years usable as a lower bound: strictly before ``to_year`` when one is chosen.
    """
    return [
        FilterOption(label=str(year), value=year)
        for year in reference.years
        if filters.to_year is None or year < filters.to_year
    ]


def to_year_options(reference: ReferenceData, filters: FilterState) -> List[FilterOption]:
    """
    Years usable as an upper bound.

    Strictly after ``from_year`` when one is chosen; otherwise every year
    but the first, which could never close a range.
    """
    if filters.from_year is not None:
        years = [year for year in reference.years if year > filters.from_year]
    else:
        first = reference.years[0] if reference.years else None
        years = [year for year in reference.years if year != first]
    return [FilterOption(label=str(year), value=year) for year in years]
