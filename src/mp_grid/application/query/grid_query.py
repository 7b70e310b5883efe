"""Application query – GridQuery, FilterCriterion, SortCriterion, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum

from mp_grid.application.filtering.operators import FilterOperator


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, text: str | None) -> "SortDirection":
        """``desc`` (any case) is descending; anything else is ascending."""
        if text is not None and text.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclasses.dataclass(frozen=True)
class FilterCriterion:
    """One column filter as requested: raw, unparsed text."""
    field: str
    operator: FilterOperator
    raw_value: str | None = None


@dataclasses.dataclass(frozen=True)
class SortCriterion:
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class GridQuery:
    """Decoded request state for one grid.

    ``page=None`` means the request carried no page, so the grid's default
    page applies. ``page=0`` is an explicit request for every row, unpaged.
    """

    filters: tuple[FilterCriterion, ...] = ()
    sort: SortCriterion | None = None
    page: int | None = None
    grid_name: str = ""


__all__ = ["FilterCriterion", "GridQuery", "SortCriterion", "SortDirection"]
