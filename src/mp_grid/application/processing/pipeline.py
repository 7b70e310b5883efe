"""Application processing – GridPipeline and GridResult."""
from __future__ import annotations

import dataclasses
from typing import Generic, Sequence, TypeVar

from mp_grid.application.processing.pager import GridPager, LinkBuilder, PagerMetadata, PagingOptions
from mp_grid.application.processing.processor import GridProcessor, ProcessorPhase
from mp_grid.application.query.source import QuerySource
from mp_grid.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class GridResult(Generic[T]):
    """Final rows of one pipeline run plus the pager that cut them."""
    rows: list[T]
    total_rows: int
    pager: GridPager | None = None

    @property
    def metadata(self) -> PagerMetadata | None:
        return self.pager.metadata if self.pager is not None else None


class GridPipeline:
    """Runs grid processors in two phases around a single row count.

    1. PRE processors, in registration order (filters, then sorting).
    2. ``count()`` of the PRE result, taken exactly once.
    3. POST processors, in registration order; when paging is enabled the
       pager is built from that count and runs first.
    """

    def __init__(
        self,
        processors: Sequence[GridProcessor] = (),
        *,
        paging: PagingOptions | None = None,
        link_builder: LinkBuilder | None = None,
    ) -> None:
        self._processors: list[GridProcessor] = list(processors)
        self.paging = paging
        self.link_builder = link_builder

    def add(self, processor: GridProcessor) -> "GridPipeline":
        """Append a processor (fluent API)."""
        self._processors.append(processor)
        return self

    @property
    def processors(self) -> tuple[GridProcessor, ...]:
        return tuple(self._processors)

    def _phase(self, phase: ProcessorPhase) -> list[GridProcessor]:
        return [p for p in self._processors if p.phase is phase]

    def run(self, source: QuerySource[T]) -> GridResult[T]:
        for processor in self._phase(ProcessorPhase.PRE):
            source = processor.process(source)

        total_rows = source.count()

        post = self._phase(ProcessorPhase.POST)
        pager: GridPager | None = None
        if self.paging is not None:
            pager = GridPager(total_rows, self.paging, self.link_builder)
            post.insert(0, pager)
        for processor in post:
            source = processor.process(source)

        rows = list(source)
        logger.debug(
            "grid.pipeline.completed",
            stages=len(self._processors) + (1 if pager is not None else 0),
            total_rows=total_rows,
            returned_rows=len(rows),
            current_page=pager.current_page if pager is not None else None,
        )
        return GridResult(rows=rows, total_rows=total_rows, pager=pager)


__all__ = ["GridPipeline", "GridResult"]
