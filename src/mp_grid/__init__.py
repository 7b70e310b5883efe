"""
mp_grid – Server-side data grid core.

Import path convention::

    from mp_grid.application.grid import Grid, GridColumn
    from mp_grid.application.query import GridQuery, InMemoryQuerySource
    from mp_grid.application.filtering import FilterCatalog, FilterOperator
    from mp_grid.adapters.fastapi import RequestLinkBuilder
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
