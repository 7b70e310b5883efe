"""Application processing – SortProcessor."""
from __future__ import annotations

from typing import Any, Callable

from mp_grid.application.processing.processor import ProcessorPhase
from mp_grid.application.query.grid_query import SortDirection
from mp_grid.application.query.source import QuerySource


class SortProcessor:
    """Reorders the source by one key; cardinality is unchanged."""

    phase = ProcessorPhase.PRE

    def __init__(self, key: Callable[[Any], Any], direction: SortDirection = SortDirection.ASC) -> None:
        self.key = key
        self.direction = direction

    def process(self, source: QuerySource[Any]) -> QuerySource[Any]:
        return source.order_by(self.key, descending=self.direction is SortDirection.DESC)

    def __repr__(self) -> str:  # pragma: no cover
        return f"SortProcessor(direction={self.direction.value!r})"


__all__ = ["SortProcessor"]
