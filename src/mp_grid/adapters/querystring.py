"""Query-string adapter – decode request parameters into a GridQuery and build page links.

Framework-neutral: works on any ``Mapping[str, str]`` of query parameters.
Everything here reads end-user input, so malformed values are dropped
rather than raised.
"""
from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode

from mp_grid.application.query.grid_query import FilterCriterion, GridQuery, SortCriterion, SortDirection
from mp_grid.application.query.parameters import (
    order_parameter,
    page_parameter,
    sort_parameter,
    split_filter_parameter,
)


def parse_page(raw: str | None) -> int | None:
    """Integer page from *raw*; ``None`` when absent, blank or not an integer."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_grid_query(params: Mapping[str, str], grid_name: str = "") -> GridQuery:
    """Build the :class:`GridQuery` for *grid_name* out of *params*.

    Keys belonging to other grids on the same page are ignored. Filters keep
    the order in which their keys appear.
    """
    filters: list[FilterCriterion] = []
    for key, value in params.items():
        parsed = split_filter_parameter(key, grid_name)
        if parsed is not None:
            column, operator = parsed
            filters.append(FilterCriterion(field=column, operator=operator, raw_value=value))

    sort: SortCriterion | None = None
    sort_field = params.get(sort_parameter(grid_name))
    if sort_field and sort_field.strip():
        direction = SortDirection.parse(params.get(order_parameter(grid_name)))
        sort = SortCriterion(field=sort_field.strip(), direction=direction)

    return GridQuery(
        filters=tuple(filters),
        sort=sort,
        page=parse_page(params.get(page_parameter(grid_name))),
        grid_name=grid_name,
    )


class QueryStringLinkBuilder:
    """Link builder that re-issues the current query string with one page key replaced.

    Example::

        builder = QueryStringLinkBuilder("/people", {"Sort": "name"})
        builder.build_link("", "Page", 2)   # '/people?Sort=name&Page=2'
    """

    def __init__(self, path: str, params: Mapping[str, str] | None = None) -> None:
        self.path = path
        self.params = dict(params or {})

    def build_link(self, grid_name: str, page_parameter: str, page: int) -> str:  # noqa: ARG002
        params = {k: v for k, v in self.params.items() if k != page_parameter}
        params[page_parameter] = str(page)
        return f"{self.path}?{urlencode(params)}"


__all__ = ["QueryStringLinkBuilder", "parse_grid_query", "parse_page"]
