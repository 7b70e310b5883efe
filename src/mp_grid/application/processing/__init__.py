"""Application processing – processors, pager and the grid pipeline."""
from mp_grid.application.processing.filter_processor import FilterProcessor
from mp_grid.application.processing.pager import (
    UNPAGED,
    GridPager,
    LinkBuilder,
    PagerMetadata,
    PagingOptions,
)
from mp_grid.application.processing.pipeline import GridPipeline, GridResult
from mp_grid.application.processing.processor import GridProcessor, ProcessorPhase
from mp_grid.application.processing.sort_processor import SortProcessor

__all__ = [
    "UNPAGED",
    "FilterProcessor",
    "GridPager",
    "GridPipeline",
    "GridProcessor",
    "GridResult",
    "LinkBuilder",
    "PagerMetadata",
    "PagingOptions",
    "ProcessorPhase",
    "SortProcessor",
]
