"""
CLI entrypoint to print one page of the filtered match list.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .clients.matches import MatchesClient
from .config import APISettings
from .models import HomeAway, Match, PerPage
from .store import MatchListStore

LOGGER = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse the match list with season, tournament, team and year filters.",
    )
    parser.add_argument("--season", type=int, help="Season id.")
    parser.add_argument("--tournament", type=int, help="Tournament id.")
    parser.add_argument("--team", type=int, help="Team id.")
    parser.add_argument("--from-year", type=int, help="First year of a year range (ignored with --season).")
    parser.add_argument("--to-year", type=int, help="Last year of a year range.")
    parser.add_argument(
        "--home-away",
        choices=[option.value for option in HomeAway],
        default=HomeAway.BOTH.value,
        help="Restrict team matches to home or away games (only used with --team).",
    )
    parser.add_argument(
        "--per-page",
        type=int,
        choices=[int(option) for option in PerPage],
        help="Page size (defaults to MATCHBROWSER_PER_PAGE or 10).",
    )
    parser.add_argument("--page", type=int, default=1, help="1-based page number to display.")
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Re-download seasons, tournaments and teams instead of using the disk cache.",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="API root URL (defaults to MATCHBROWSER_API_URL or http://127.0.0.1:3000).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser


def format_match(match: Match) -> str:
    parts = [match.date or "????-??-??"]
    if match.time:
        parts.append(match.time)
    parts.append(f"{match.team1} {match.score.display()} {match.team2}")
    parts.append(f"[{match.tournament_name}]")
    if match.round:
        parts.append(match.round)
    if match.stage:
        parts.append(match.stage)
    return "  ".join(parts)


def _apply_filters(store: MatchListStore, args: argparse.Namespace) -> None:
    filters = store.filters
    if args.team is not None:
        filters.select_team(args.team)
    if args.tournament is not None:
        filters.select_tournament(args.tournament)
    if args.from_year is not None:
        filters.select_from_year(args.from_year)
    if args.to_year is not None:
        filters.select_to_year(args.to_year)
    # Applied last so it wins over a year range, as in the interactive selector.
    if args.season is not None:
        filters.select_season(args.season)
    filters.select_home_away(args.home_away)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.page < 1:
        parser.error("--page must be 1 or greater")

    settings = APISettings.from_env()
    if args.base_url:
        settings = replace(settings, base_url=args.base_url)

    with MatchesClient(settings) as client:
        store = MatchListStore(client, per_page=args.per_page or settings.default_per_page)
        _apply_filters(store, args)
        if not store.fetch_metadata(refresh=args.refresh):
            LOGGER.error("Could not load matches from %s", settings.base_url)
            return 1
        if args.page > 1 and not store.on_paginate_jump(True, args.page - 1):
            LOGGER.error("Could not load page %s", args.page)
            return 1

    state = store.state
    for match in state.list:
        print(format_match(match))
    page = state.pagination.offset // int(state.pagination.per_page) + 1
    print(f"page {page}/{state.pagination.total_pages} (total {state.total})")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
