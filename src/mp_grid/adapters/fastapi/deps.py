"""FastAPI adapter – GridQuery dependency and request-bound link builder."""

from typing import TYPE_CHECKING, Any, Awaitable, Callable

from mp_grid.adapters.querystring import parse_grid_query
from mp_grid.application.query.grid_query import GridQuery

if TYPE_CHECKING:
    from starlette.requests import Request


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'mp-grid[fastapi]' to use the FastAPI adapter"
        ) from exc


def grid_query_dependency(grid_name: str = "") -> Callable[..., Awaitable[GridQuery]]:
    """Return a dependency that decodes the request's query string for *grid_name*.

    Usage::

        people_query = grid_query_dependency("People")

        @app.get("/people")
        async def people(query: GridQuery = Depends(people_query)): ...
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    async def grid_query_dep(request: Request) -> GridQuery:
        return parse_grid_query(request.query_params, grid_name)

    return grid_query_dep


class RequestLinkBuilder:
    """Builds page links relative to the current request URL.

    All other query parameters are preserved, so links for one grid keep
    the state of every other grid on the page.
    """

    def __init__(self, request: "Request") -> None:
        _require_fastapi()
        self.request = request

    def build_link(self, grid_name: str, page_parameter: str, page: int) -> str:  # noqa: ARG002
        params: dict[str, Any] = {page_parameter: page}
        url = self.request.url.include_query_params(**params)
        return f"{url.path}?{url.query}"


__all__ = ["RequestLinkBuilder", "grid_query_dependency"]
