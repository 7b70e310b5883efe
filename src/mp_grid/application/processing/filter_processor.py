"""Application processing – FilterProcessor."""
from __future__ import annotations

from typing import Any

from mp_grid.application.processing.processor import ProcessorPhase
from mp_grid.application.query.source import QuerySource
from mp_grid.kernel.predicate import Predicate


class FilterProcessor:
    """Narrows the source to the records *predicate* accepts."""

    phase = ProcessorPhase.PRE

    def __init__(self, predicate: Predicate[Any]) -> None:
        self.predicate = predicate

    def process(self, source: QuerySource[Any]) -> QuerySource[Any]:
        return source.where(self.predicate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"FilterProcessor({self.predicate!r})"


__all__ = ["FilterProcessor"]
