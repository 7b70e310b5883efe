"""Application grid – GridColumn."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from mp_grid.application.filtering.operators import FilterOperator, ValueKind


@dataclasses.dataclass(frozen=True)
class GridColumn:
    """A column a grid can filter and sort on.

    ``accessor`` projects a record onto the column value and may return
    ``None`` for nullable fields. ``operators=None`` allows every operator
    the grid's catalog supports for the column's value kind.
    """

    name: str
    accessor: Callable[[Any], Any]
    value_type: type = str
    filterable: bool = True
    sortable: bool = True
    operators: frozenset[FilterOperator] | None = None

    def __post_init__(self) -> None:
        if self.operators is not None and not isinstance(self.operators, frozenset):
            object.__setattr__(self, "operators", frozenset(self.operators))

    @classmethod
    def attribute(cls, name: str, value_type: type = str, **kwargs: Any) -> "GridColumn":
        """Column reading the record attribute (or mapping key) called *name*."""

        def _get(record: Any) -> Any:
            if isinstance(record, dict):
                return record.get(name)
            return getattr(record, name, None)

        return cls(name=name, accessor=_get, value_type=value_type, **kwargs)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.for_type(self.value_type)


__all__ = ["GridColumn"]
