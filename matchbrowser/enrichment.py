"""
Resolve display fields of fetched matches against cached reference data.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from .models import TOURNAMENT_NAME_FALLBACK, Match
from .reference import ReferenceData


def add_tournament_names(matches: Iterable[Match], reference: ReferenceData) -> List[Match]:
    """
    Return copies of ``matches`` with ``tournament_name`` filled in.

    Unknown or unnamed tournaments get ``TOURNAMENT_NAME_FALLBACK``.
    """
    return [
        replace(
            match,
            tournament_name=reference.tournament_name(match.tournament_id)
            or TOURNAMENT_NAME_FALLBACK,
        )
        for match in matches
    ]
