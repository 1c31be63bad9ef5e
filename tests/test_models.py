from __future__ import annotations

import pytest

from matchbrowser.exceptions import ResponseFormatError
from matchbrowser.models import HomeAway, Match, PerPage, QueryResult, Score, Season


def test_season_label_with_and_without_end_year():
    assert Season.from_dict({"id": 1, "start_year": 2019, "end_year": 2020}).label == "2019-2020"
    assert Season.from_dict({"id": 2, "start_year": 2022}).label == "2022"


def test_score_accepts_raw_keys():
    score = Score.from_dict({"ht": [1, 0], "ft": [2, 2]})
    assert score == Score(half_time=(1, 0), full_time=(2, 2))
    assert score.display() == "2-2 (1-0)"
    assert Score.from_dict(None).display() == "-"


def test_score_rejects_bad_pairs():
    with pytest.raises(ResponseFormatError):
        Score.from_dict({"full_time": [1, 2, 3]})


def test_match_requires_identity_fields():
    with pytest.raises(ResponseFormatError, match="team2"):
        Match.from_dict({"id": 1, "season_id": 1, "tournament_id": 1, "team1": "A"})


def test_match_optional_fields_default_to_none():
    match = Match.from_dict(
        {"id": 1, "season_id": 2, "tournament_id": 3, "team1": "A", "team2": "B", "score": {}}
    )
    assert match.round is None
    assert match.time is None
    assert match.stage is None
    assert match.score == Score()


def test_query_result_allows_empty_page():
    result = QueryResult.from_dict({"list": [], "total": 0})
    assert result.list == []
    assert result.total == 0


@pytest.mark.parametrize(
    "payload",
    [[], {"list": []}, {"total": 3}, {"list": {}, "total": 1}, {"list": [], "total": -1}],
)
def test_query_result_rejects_bad_shapes(payload):
    with pytest.raises(ResponseFormatError):
        QueryResult.from_dict(payload)


def test_enums_validate_values():
    assert HomeAway("away") is HomeAway.AWAY
    assert PerPage(250) is PerPage.TWO_HUNDRED_FIFTY
    with pytest.raises(ValueError):
        PerPage(20)
