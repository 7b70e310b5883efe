"""Application processing – ProcessorPhase and the GridProcessor protocol."""
from __future__ import annotations

import enum
from typing import Any, Protocol, runtime_checkable

from mp_grid.application.query.source import QuerySource


class ProcessorPhase(str, enum.Enum):
    """When a processor runs relative to the row-count snapshot."""

    PRE = "pre"
    POST = "post"


@runtime_checkable
class GridProcessor(Protocol):
    """One pipeline stage: a pure ``QuerySource -> QuerySource`` transform."""

    phase: ProcessorPhase

    def process(self, source: QuerySource[Any]) -> QuerySource[Any]: ...


__all__ = ["GridProcessor", "ProcessorPhase"]
