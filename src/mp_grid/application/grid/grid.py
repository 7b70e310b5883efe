"""Application grid – Grid: column declarations wired to a processing pipeline."""
from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from mp_grid.application.filtering.catalog import FilterCatalog, default_catalog
from mp_grid.application.filtering.operators import FilterOperator
from mp_grid.application.grid.column import GridColumn
from mp_grid.application.processing.filter_processor import FilterProcessor
from mp_grid.application.processing.pager import LinkBuilder, PagingOptions
from mp_grid.application.processing.pipeline import GridPipeline, GridResult
from mp_grid.application.processing.sort_processor import SortProcessor
from mp_grid.application.query.grid_query import FilterCriterion, GridQuery
from mp_grid.application.query.source import QuerySource
from mp_grid.config.settings import GridSettings
from mp_grid.kernel.errors import DuplicateColumnError, UnsupportedFilterOperatorError
from mp_grid.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Grid(Generic[T]):
    """A set of columns plus the paging defaults that apply to them.

    Column declarations are checked against the filter catalog here, so a
    column that asks for an operator its type cannot support fails before any
    request is served. Request criteria that name unknown columns or
    operators a column does not allow are user input: they are skipped.

    Example::

        grid = Grid([
            GridColumn.attribute("name"),
            GridColumn.attribute("age", int),
        ])
        result = grid.process(InMemoryQuerySource(people), query)
    """

    def __init__(
        self,
        columns: Iterable[GridColumn],
        *,
        catalog: FilterCatalog | None = None,
        settings: GridSettings | None = None,
        link_builder: LinkBuilder | None = None,
        pageable: bool = True,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.settings = settings if settings is not None else GridSettings()
        self.link_builder = link_builder
        self.pageable = pageable
        self._columns: dict[str, GridColumn] = {}
        self._operators: dict[str, frozenset[FilterOperator]] = {}
        for column in columns:
            self._declare(column)

    def _declare(self, column: GridColumn) -> None:
        if column.name in self._columns:
            raise DuplicateColumnError(column.name)
        kind = column.kind
        if column.operators is None:
            allowed = self.catalog.operators_for(kind)
        else:
            for operator in column.operators:
                if not self.catalog.supports(kind, operator):
                    raise UnsupportedFilterOperatorError(kind, operator, column=column.name)
            allowed = column.operators
        self._columns[column.name] = column
        self._operators[column.name] = allowed if column.filterable else frozenset()

    # -- introspection ---------------------------------------------------

    @property
    def columns(self) -> tuple[GridColumn, ...]:
        return tuple(self._columns.values())

    def column(self, name: str) -> GridColumn | None:
        return self._columns.get(name)

    def operators_for(self, name: str) -> frozenset[FilterOperator]:
        return self._operators.get(name, frozenset())

    # -- request handling ------------------------------------------------

    def _filter_processor(self, criterion: FilterCriterion) -> FilterProcessor | None:
        column = self._columns.get(criterion.field)
        if column is None or criterion.operator not in self.operators_for(criterion.field):
            logger.debug(
                "grid.query.criterion_skipped",
                field=criterion.field,
                operator=criterion.operator.value,
                reason="unknown column" if column is None else "operator not allowed",
            )
            return None
        predicate = self.catalog.build_predicate(
            criterion.operator, column.accessor, criterion.raw_value, column.value_type
        )
        return FilterProcessor(predicate)

    def _sort_processor(self, query: GridQuery) -> SortProcessor | None:
        if query.sort is None:
            return None
        column = self._columns.get(query.sort.field)
        if column is None or not column.sortable:
            logger.debug("grid.query.criterion_skipped", field=query.sort.field, reason="not sortable")
            return None
        return SortProcessor(column.accessor, query.sort.direction)

    def paging_options(self, query: GridQuery) -> PagingOptions | None:
        if not self.pageable:
            return None
        page = query.page if query.page is not None else self.settings.default_page
        return PagingOptions(
            current_page=page,
            rows_per_page=self.settings.rows_per_page,
            pages_to_display=self.settings.pages_to_display,
            grid_name=query.grid_name,
        )

    def build_pipeline(self, query: GridQuery) -> GridPipeline:
        """Translate *query* into a fresh pipeline: filters, then sorting, then paging."""
        pipeline = GridPipeline(paging=self.paging_options(query), link_builder=self.link_builder)
        for criterion in query.filters:
            processor = self._filter_processor(criterion)
            if processor is not None:
                pipeline.add(processor)
        sorter = self._sort_processor(query)
        if sorter is not None:
            pipeline.add(sorter)
        return pipeline

    def process(self, source: QuerySource[T], query: GridQuery | None = None) -> GridResult[T]:
        return self.build_pipeline(query or GridQuery()).run(source)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Grid(columns={list(self._columns)!r})"


__all__ = ["Grid"]
