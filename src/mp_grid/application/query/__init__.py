"""Application query – query sources, decoded grid requests and parameter naming."""
from mp_grid.application.query.grid_query import FilterCriterion, GridQuery, SortCriterion, SortDirection
from mp_grid.application.query.parameters import (
    filter_parameter,
    order_parameter,
    page_parameter,
    qualify,
    sort_parameter,
    split_filter_parameter,
)
from mp_grid.application.query.source import InMemoryQuerySource, QuerySource

__all__ = [
    "FilterCriterion",
    "GridQuery",
    "InMemoryQuerySource",
    "QuerySource",
    "SortCriterion",
    "SortDirection",
    "filter_parameter",
    "order_parameter",
    "page_parameter",
    "qualify",
    "sort_parameter",
    "split_filter_parameter",
]
