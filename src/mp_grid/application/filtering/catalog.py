"""Application filtering – FilterCatalog.

The catalog maps ``(ValueKind, FilterOperator)`` to the filter strategy that
handles it. Grids resolve their columns' operators against a catalog when they
are constructed, so an unsupported combination fails at setup rather than on
a live request.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar

from mp_grid.application.filtering.filters import (
    EqualsFilter,
    GreaterThanFilter,
    GreaterThanOrEqualFilter,
    GridFilter,
    InFilter,
    LessThanFilter,
    LessThanOrEqualFilter,
    NotEqualsFilter,
    StringContainsFilter,
    StringEndsWithFilter,
    StringEqualsFilter,
    StringNotEqualsFilter,
    StringStartsWithFilter,
)
from mp_grid.application.filtering.operators import FilterOperator, ValueKind
from mp_grid.kernel.errors import UnsupportedFilterOperatorError
from mp_grid.kernel.predicate import Predicate

T = TypeVar("T")

FilterType = type[GridFilter[Any]]


class FilterCatalog:
    """Registry of filter strategies keyed by value kind and operator."""

    def __init__(self) -> None:
        self._filters: dict[tuple[ValueKind, FilterOperator], FilterType] = {}

    def register(self, kind: ValueKind, filter_type: FilterType) -> "FilterCatalog":
        """Register *filter_type* for its operator on *kind*, replacing any previous one."""
        self._filters[(kind, filter_type.operator)] = filter_type
        return self

    def supports(self, kind: ValueKind, operator: FilterOperator) -> bool:
        return (kind, operator) in self._filters

    def operators_for(self, kind: ValueKind) -> frozenset[FilterOperator]:
        return frozenset(op for k, op in self._filters if k is kind)

    def resolve(self, kind: ValueKind, operator: FilterOperator) -> FilterType:
        """Return the filter strategy for *operator* on *kind*.

        Raises:
            UnsupportedFilterOperatorError: nothing is registered for the pair.
        """
        try:
            return self._filters[(kind, operator)]
        except KeyError:
            raise UnsupportedFilterOperatorError(kind, operator) from None

    def create(
        self,
        operator: FilterOperator,
        accessor: Callable[[T], Any],
        raw_value: str | None,
        value_type: type,
    ) -> GridFilter[T]:
        filter_type = self.resolve(ValueKind.for_type(value_type), operator)
        return filter_type(accessor=accessor, raw_value=raw_value, value_type=value_type)

    def build_predicate(
        self,
        operator: FilterOperator,
        accessor: Callable[[T], Any],
        raw_value: str | None,
        value_type: type = str,
    ) -> Predicate[T]:
        """Build the predicate for one column filter."""
        return self.create(operator, accessor, raw_value, value_type).predicate()

    def __iter__(self) -> Iterator[tuple[ValueKind, FilterOperator]]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)


_COMPARISONS: tuple[FilterType, ...] = (
    EqualsFilter,
    NotEqualsFilter,
    GreaterThanFilter,
    LessThanFilter,
    GreaterThanOrEqualFilter,
    LessThanOrEqualFilter,
)

_DEFAULTS: dict[ValueKind, tuple[FilterType, ...]] = {
    ValueKind.STRING: (
        StringEqualsFilter,
        StringNotEqualsFilter,
        StringContainsFilter,
        StringStartsWithFilter,
        StringEndsWithFilter,
    ),
    ValueKind.NUMBER: _COMPARISONS + (InFilter,),
    ValueKind.DATE: _COMPARISONS,
    ValueKind.BOOLEAN: (EqualsFilter, NotEqualsFilter),
    ValueKind.IDENTIFIER: (EqualsFilter, NotEqualsFilter, InFilter),
    ValueKind.ENUM: (EqualsFilter, NotEqualsFilter, InFilter),
}


def default_catalog() -> FilterCatalog:
    """Return a new catalog holding every built-in filter."""
    catalog = FilterCatalog()
    for kind, filter_types in _DEFAULTS.items():
        for filter_type in filter_types:
            catalog.register(kind, filter_type)
    return catalog


__all__ = ["FilterCatalog", "FilterType", "default_catalog"]
