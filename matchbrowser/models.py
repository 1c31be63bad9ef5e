"""
Domain types for seasons, tournaments, teams and matches.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from .exceptions import ResponseFormatError

TOURNAMENT_NAME_FALLBACK = "Tournament Name N/A"

Goals = Tuple[int, int]


class HomeAway(str, Enum):
    BOTH = "both"
    HOME = "home"
    AWAY = "away"


class PerPage(int, Enum):
    TEN = 10
    TWENTY_FIVE = 25
    FIFTY = 50
    HUNDRED = 100
    TWO_HUNDRED_FIFTY = 250


def _require(payload: Mapping[str, Any], key: str, kind: str) -> Any:
    if not isinstance(payload, Mapping):
        raise ResponseFormatError(f"Expected a JSON object for {kind}, got {type(payload).__name__}")
    if payload.get(key) is None:
        raise ResponseFormatError(f"{kind} record is missing '{key}'")
    return payload[key]


def _to_int(value: Any, kind: str, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(f"{kind} field '{key}' is not an integer: {value!r}") from exc


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Season:
    id: int
    start_year: int
    end_year: Optional[int] = None

    @property
    def label(self) -> str:
        if self.end_year:
            return f"{self.start_year}-{self.end_year}"
        return str(self.start_year)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Season":
        end_year = payload.get("end_year") if isinstance(payload, Mapping) else None
        return cls(
            id=_to_int(_require(payload, "id", "Season"), "Season", "id"),
            start_year=_to_int(_require(payload, "start_year", "Season"), "Season", "start_year"),
            end_year=_to_int(end_year, "Season", "end_year") if end_year is not None else None,
        )


@dataclass(frozen=True)
class Tournament:
    id: int
    name: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Tournament":
        return cls(
            id=_to_int(_require(payload, "id", "Tournament"), "Tournament", "id"),
            name=str(_require(payload, "name", "Tournament")),
        )


@dataclass(frozen=True)
class Team:
    id: int
    name: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Team":
        return cls(
            id=_to_int(_require(payload, "id", "Team"), "Team", "id"),
            name=str(_require(payload, "name", "Team")),
        )


def _goals(value: Any) -> Optional[Goals]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ResponseFormatError(f"Score must be a pair of goals, got {value!r}")
    return (_to_int(value[0], "Score", "goals"), _to_int(value[1], "Score", "goals"))


@dataclass(frozen=True)
class Score:
    half_time: Optional[Goals] = None
    full_time: Optional[Goals] = None

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "Score":
        if not payload:
            return cls()
        # The server serialises half_time/full_time, raw match files use ht/ft.
        half_time = payload.get("half_time", payload.get("ht"))
        full_time = payload.get("full_time", payload.get("ft"))
        return cls(half_time=_goals(half_time), full_time=_goals(full_time))

    def display(self) -> str:
        if self.full_time is None:
            return "-"
        text = f"{self.full_time[0]}-{self.full_time[1]}"
        if self.half_time is not None:
            text += f" ({self.half_time[0]}-{self.half_time[1]})"
        return text


@dataclass(frozen=True)
class Match:
    id: int
    season_id: int
    tournament_id: int
    team1: str
    team2: str
    score: Score = field(default_factory=Score)
    tournament_name: Optional[str] = None
    round: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    stage: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Match":
        score = payload.get("score") if isinstance(payload, Mapping) else None
        if score is not None and not isinstance(score, Mapping):
            raise ResponseFormatError(f"Match score must be an object, got {score!r}")
        return cls(
            id=_to_int(_require(payload, "id", "Match"), "Match", "id"),
            season_id=_to_int(_require(payload, "season_id", "Match"), "Match", "season_id"),
            tournament_id=_to_int(
                _require(payload, "tournament_id", "Match"), "Match", "tournament_id"
            ),
            team1=str(_require(payload, "team1", "Match")),
            team2=str(_require(payload, "team2", "Match")),
            score=Score.from_dict(score),
            round=_optional_str(payload.get("round")),
            date=_optional_str(payload.get("date")),
            time=_optional_str(payload.get("time")),
            stage=_optional_str(payload.get("stage")),
        )


@dataclass(frozen=True)
class QueryResult:
    list: List[Match]
    total: int

    @classmethod
    def from_dict(cls, payload: Any) -> "QueryResult":
        if not isinstance(payload, Mapping):
            raise ResponseFormatError("Match list response must be a JSON object")
        if "list" not in payload or "total" not in payload:
            raise ResponseFormatError("Match list response must contain 'list' and 'total'")
        records = payload["list"]
        if not isinstance(records, list):
            raise ResponseFormatError("Match list response 'list' must be an array")
        total = _to_int(payload["total"], "Match list", "total")
        if total < 0:
            raise ResponseFormatError(f"Match list total must not be negative, got {total}")
        return cls(list=[Match.from_dict(item) for item in records], total=total)


@dataclass(frozen=True)
class FilterOption:
    label: str
    value: int
