from __future__ import annotations

import pytest

from matchbrowser.models import PerPage
from matchbrowser.pagination import PaginationState


@pytest.mark.parametrize("per_page", list(PerPage))
@pytest.mark.parametrize("total", [0, 1, 10, 999])
@pytest.mark.parametrize("multiplier", [1, 3])
def test_backward_from_zero_stays_at_zero(per_page, total, multiplier):
    pagination = PaginationState(offset=0, per_page=per_page)
    assert pagination.normalize_offset(total, forward=False, multiplier=multiplier) == 0


def test_backward_steps_and_clamps():
    pagination = PaginationState(offset=30, per_page=PerPage.TEN)
    assert pagination.normalize_offset(100, forward=False) == 20
    assert pagination.normalize_offset(100, forward=False, multiplier=5) == 0


def test_forward_within_range():
    pagination = PaginationState(offset=0, per_page=PerPage.TEN)
    assert pagination.normalize_offset(100, forward=True) == 10
    assert pagination.normalize_offset(100, forward=True, multiplier=5) == 50


def test_forward_overshoot_snaps_to_last_page():
    pagination = PaginationState(offset=20, per_page=PerPage.TEN)
    assert pagination.normalize_offset(25, forward=True) == 20


def test_forward_jump_overshoot_snaps_to_last_page():
    pagination = PaginationState(offset=0, per_page=PerPage.TEN)
    assert pagination.normalize_offset(95, forward=True, multiplier=50) == 90


def test_forward_landing_exactly_on_total_steps_back():
    pagination = PaginationState(offset=10, per_page=PerPage.TEN)
    assert pagination.normalize_offset(20, forward=True) == 10


def test_forward_overshoot_on_exact_multiple_steps_back():
    pagination = PaginationState(offset=0, per_page=PerPage.TEN)
    assert pagination.normalize_offset(30, forward=True, multiplier=10) == 20


def test_forward_on_empty_result_stays_at_zero():
    pagination = PaginationState(offset=0, per_page=PerPage.TEN)
    assert pagination.normalize_offset(0, forward=True) == 0


def test_forward_after_result_shrank_returns_to_last_page():
    pagination = PaginationState(offset=50, per_page=PerPage.TEN)
    assert pagination.normalize_offset(20, forward=True) == 10


@pytest.mark.parametrize("per_page", list(PerPage))
@pytest.mark.parametrize("total", [1, 9, 10, 11, 250, 251, 1000])
@pytest.mark.parametrize("multiplier", [1, 2, 10])
def test_forward_never_lands_on_total(per_page, total, multiplier):
    for offset in range(0, total, int(per_page)):
        pagination = PaginationState(offset=offset, per_page=per_page)
        new_offset = pagination.normalize_offset(total, forward=True, multiplier=multiplier)
        assert 0 <= new_offset < total


def test_multiplier_must_be_positive():
    with pytest.raises(ValueError):
        PaginationState().normalize_offset(10, forward=True, multiplier=0)


@pytest.mark.parametrize("offset", [0, 5, 10, 240])
@pytest.mark.parametrize("per_page", list(PerPage))
def test_zero_total_has_one_page(offset, per_page):
    pagination = PaginationState(offset=offset, per_page=per_page, total_pages=7)
    assert pagination.update_total_pages(0) == 1
    assert pagination.total_pages == 1


@pytest.mark.parametrize(
    "offset, per_page, total, expected",
    [
        (0, 10, 25, 3),
        (0, 10, 30, 3),
        (20, 10, 25, 3),
        (0, 25, 1, 1),
        # A page-size change keeps offset 10, giving a short 10-item first page.
        (10, 25, 60, 3),
        (10, 25, 35, 2),
        (30, 50, 130, 3),
    ],
)
def test_total_pages_depends_on_offset_phase(offset, per_page, total, expected):
    pagination = PaginationState(offset=offset, per_page=per_page)
    assert pagination.update_total_pages(total) == expected


def test_reset_and_per_page_validation():
    pagination = PaginationState(offset=40, per_page=PerPage.TEN, total_pages=9)
    pagination.reset()
    assert (pagination.offset, pagination.total_pages) == (0, 1)
    pagination.set_per_page(100)
    assert pagination.per_page is PerPage.HUNDRED
    with pytest.raises(ValueError):
        pagination.set_per_page(15)
    with pytest.raises(ValueError):
        PaginationState(offset=-1)
