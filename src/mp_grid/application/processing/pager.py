"""Application processing – GridPager, PagingOptions, PagerMetadata, LinkBuilder.

Page numbering
--------------
``current_page`` is 1-based: page ``k`` shows rows ``(k-1)*rows_per_page``
up to ``k*rows_per_page``. ``0`` is a sentinel meaning *unpaged*: every row
is returned and no skip/take is applied. Negative pages are out of range and
yield an empty page.

``starting_page`` is the zero-based offset of the first page in the
navigation window, so the window shows page numbers
``starting_page + 1`` through ``starting_page + pages_to_display`` (clipped
to ``total_pages``).
"""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Protocol, runtime_checkable

from mp_grid.application.processing.processor import ProcessorPhase
from mp_grid.application.query.parameters import is_named, page_parameter
from mp_grid.application.query.source import QuerySource
from mp_grid.kernel.errors import InvalidPagingOptionError, LinkBuilderNotConfiguredError

UNPAGED = 0


@runtime_checkable
class LinkBuilder(Protocol):
    """Host-supplied capability that turns a page number into a link."""

    def build_link(self, grid_name: str, page_parameter: str, page: int) -> str: ...


@dataclasses.dataclass(frozen=True)
class PagingOptions:
    """Per-request pager settings."""
    current_page: int = 1
    rows_per_page: int = 20
    pages_to_display: int = 5
    grid_name: str = ""

    def __post_init__(self) -> None:
        if self.rows_per_page < 1:
            raise InvalidPagingOptionError("rows_per_page", self.rows_per_page, "must be >= 1")
        if self.pages_to_display < 1:
            raise InvalidPagingOptionError("pages_to_display", self.pages_to_display, "must be >= 1")


@dataclasses.dataclass(frozen=True)
class PagerMetadata:
    """Pagination facts handed to whatever renders the pager."""
    current_page: int
    total_pages: int
    total_rows: int
    rows_per_page: int
    pages_to_display: int
    starting_page: int
    pages: tuple[int, ...] = ()

    @property
    def is_paged(self) -> bool:
        return self.current_page != UNPAGED

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return 0 < self.current_page < self.total_pages


class GridPager:
    """POST-phase processor that cuts one page out of the source.

    ``total_rows`` is captured once, when the pager is built, from the
    source as it stands after filtering; it does not change when the pager
    later narrows the source.
    """

    phase = ProcessorPhase.POST

    def __init__(
        self,
        total_rows: int,
        options: PagingOptions | None = None,
        link_builder: LinkBuilder | None = None,
    ) -> None:
        if total_rows < 0:
            raise InvalidPagingOptionError("total_rows", total_rows, "must be >= 0")
        self.total_rows = total_rows
        self.options = options or PagingOptions()
        self.link_builder = link_builder

    @classmethod
    def from_source(
        cls,
        source: QuerySource[Any],
        options: PagingOptions | None = None,
        link_builder: LinkBuilder | None = None,
    ) -> "GridPager":
        return cls(source.count(), options, link_builder)

    # -- options ---------------------------------------------------------

    @property
    def current_page(self) -> int:
        return self.options.current_page

    @property
    def rows_per_page(self) -> int:
        return self.options.rows_per_page

    @property
    def pages_to_display(self) -> int:
        return self.options.pages_to_display

    @property
    def grid_name(self) -> str:
        return self.options.grid_name if is_named(self.options.grid_name) else ""

    @property
    def page_parameter(self) -> str:
        return page_parameter(self.options.grid_name)

    # -- derived ---------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_rows / self.rows_per_page)

    @property
    def starting_page(self) -> int:
        middle = math.ceil(self.pages_to_display / 2)
        if self.current_page < middle:
            return 0
        if self.current_page - middle + self.pages_to_display >= self.total_pages:
            return max(self.total_pages - self.pages_to_display, 0)
        return self.current_page - middle + 1

    @property
    def pages(self) -> tuple[int, ...]:
        """1-based page numbers inside the navigation window."""
        first = self.starting_page + 1
        last = min(self.starting_page + self.pages_to_display, self.total_pages)
        return tuple(range(first, last + 1))

    @property
    def metadata(self) -> PagerMetadata:
        return PagerMetadata(
            current_page=self.current_page,
            total_pages=self.total_pages,
            total_rows=self.total_rows,
            rows_per_page=self.rows_per_page,
            pages_to_display=self.pages_to_display,
            starting_page=self.starting_page,
            pages=self.pages,
        )

    # -- processing ------------------------------------------------------

    def process(self, source: QuerySource[Any]) -> QuerySource[Any]:
        if self.current_page == UNPAGED:
            return source
        if self.current_page < 0:
            return source.take(0)
        return source.skip((self.current_page - 1) * self.rows_per_page).take(self.rows_per_page)

    def link_for_page(self, page: int) -> str:
        """Ask the link builder for the link to *page*.

        Raises:
            LinkBuilderNotConfiguredError: the pager was built without one.
        """
        if self.link_builder is None:
            raise LinkBuilderNotConfiguredError("GridPager has no link builder")
        return self.link_builder.build_link(self.grid_name, self.page_parameter, page)

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"GridPager(total_rows={self.total_rows}, current_page={self.current_page}, "
            f"rows_per_page={self.rows_per_page})"
        )


__all__ = ["UNPAGED", "GridPager", "LinkBuilder", "PagerMetadata", "PagingOptions"]
