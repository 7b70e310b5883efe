"""Application query – query-parameter naming for grids.

An unnamed grid uses the bare keys (``Page``, ``Sort``, ``Order``,
``Filter-<column>-<operator>``). A named grid suffixes every key with
``-<name>`` so several grids can share one query string: grid ``Grid``
pages through ``Page-Grid``.
"""
from __future__ import annotations

from mp_grid.application.filtering.operators import FilterOperator

PAGE_KEY = "Page"
SORT_KEY = "Sort"
ORDER_KEY = "Order"
FILTER_KEY = "Filter"


def is_named(grid_name: str | None) -> bool:
    return bool(grid_name and grid_name.strip())


def qualify(key: str, grid_name: str | None = "") -> str:
    """Return *key* namespaced for *grid_name*; whitespace-only names count as unnamed."""
    if not is_named(grid_name):
        return key
    return f"{key}-{grid_name}"


def page_parameter(grid_name: str | None = "") -> str:
    return qualify(PAGE_KEY, grid_name)


def sort_parameter(grid_name: str | None = "") -> str:
    return qualify(SORT_KEY, grid_name)


def order_parameter(grid_name: str | None = "") -> str:
    return qualify(ORDER_KEY, grid_name)


def filter_parameter(column: str, operator: FilterOperator, grid_name: str | None = "") -> str:
    return qualify(f"{FILTER_KEY}-{column}-{operator.value}", grid_name)


def split_filter_parameter(key: str, grid_name: str | None = "") -> tuple[str, FilterOperator] | None:
    """Inverse of :func:`filter_parameter`.

    Returns ``(column, operator)`` or ``None`` when *key* is not a filter key
    for this grid. Operators contain hyphens, so the longest operator suffix
    wins (``not-equals`` before ``equals``).
    """
    if is_named(grid_name):
        suffix = f"-{grid_name}"
        if not key.endswith(suffix):
            return None
        key = key[: -len(suffix)]
    prefix = f"{FILTER_KEY}-"
    if not key.startswith(prefix):
        return None
    rest = key[len(prefix):]
    for operator in sorted(FilterOperator, key=lambda op: len(op.value), reverse=True):
        tail = f"-{operator.value}"
        if rest.endswith(tail) and len(rest) > len(tail):
            return rest[: -len(tail)], operator
    return None


__all__ = [
    "FILTER_KEY",
    "ORDER_KEY",
    "PAGE_KEY",
    "SORT_KEY",
    "filter_parameter",
    "is_named",
    "order_parameter",
    "page_parameter",
    "qualify",
    "sort_parameter",
    "split_filter_parameter",
]
