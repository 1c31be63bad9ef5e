"""
Offset arithmetic for paging through a filtered match list.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .models import PerPage


@dataclass
class PaginationState:
    """
    Current window into the result set.

    ``offset`` is normally a multiple of ``per_page``; a page size change
    keeps the offset, so the phase ``offset % per_page`` can be non-zero and
    ``total_pages`` then counts the short leading page separately.
    """

    offset: int = 0
    per_page: PerPage = PerPage.TEN
    total_pages: int = 1

    def __post_init__(self) -> None:
        self.per_page = PerPage(self.per_page)
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")

    def set_per_page(self, per_page: Union[PerPage, int]) -> None:
        self.per_page = PerPage(per_page)

    def normalize_offset(self, total: int, forward: bool, multiplier: int = 1) -> int:
        """
        Return the offset reached by moving ``multiplier`` pages.

        Moving backward stops at zero. Moving forward never lands on
        ``total`` itself, so the resulting page holds at least one match
        whenever ``total`` is positive.
        """
        if multiplier < 1:
            raise ValueError(f"multiplier must be a positive integer, got {multiplier}")
        per_page = int(self.per_page)
        amount = per_page * multiplier
        if not forward:
            return max(0, self.offset - amount)
        if self.offset + amount < total:
            return self.offset + amount
        new_offset = self.offset + ((total - self.offset) // per_page) * per_page
        if new_offset == total:
            new_offset -= per_page
        return max(0, new_offset)

    def update_total_pages(self, total: int) -> int:
        per_page = int(self.per_page)
        if total == 0:
            self.total_pages = 1
        else:
            phase = self.offset % per_page
            self.total_pages = (1 if phase > 0 else 0) + math.ceil((total - phase) / per_page)
        return self.total_pages

    def reset(self) -> None:
        self.offset = 0
        self.total_pages = 1
