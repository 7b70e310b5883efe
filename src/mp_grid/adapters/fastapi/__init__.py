"""FastAPI adapter – request query decoding and page links."""
from mp_grid.adapters.fastapi.deps import RequestLinkBuilder, grid_query_dependency

__all__ = ["RequestLinkBuilder", "grid_query_dependency"]
