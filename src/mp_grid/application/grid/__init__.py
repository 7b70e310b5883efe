"""Application grid – column declarations and the Grid facade."""
from mp_grid.application.grid.column import GridColumn
from mp_grid.application.grid.grid import Grid

__all__ = ["Grid", "GridColumn"]
