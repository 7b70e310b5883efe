"""Application – query sources, filter engine, processors and grids (framework-agnostic)."""

from mp_grid.application.filtering import FilterCatalog, FilterOperator, ValueKind, default_catalog
from mp_grid.application.grid import Grid, GridColumn
from mp_grid.application.processing import (
    FilterProcessor,
    GridPager,
    GridPipeline,
    GridProcessor,
    GridResult,
    LinkBuilder,
    PagerMetadata,
    PagingOptions,
    ProcessorPhase,
    SortProcessor,
)
from mp_grid.application.query import (
    FilterCriterion,
    GridQuery,
    InMemoryQuerySource,
    QuerySource,
    SortCriterion,
    SortDirection,
)

__all__ = [
    "FilterCatalog",
    "FilterCriterion",
    "FilterOperator",
    "FilterProcessor",
    "Grid",
    "GridColumn",
    "GridPager",
    "GridPipeline",
    "GridProcessor",
    "GridQuery",
    "GridResult",
    "InMemoryQuerySource",
    "LinkBuilder",
    "PagerMetadata",
    "PagingOptions",
    "ProcessorPhase",
    "QuerySource",
    "SortCriterion",
    "SortDirection",
    "SortProcessor",
    "ValueKind",
    "default_catalog",
]
