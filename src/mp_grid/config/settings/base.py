"""Config settings – Settings base class and GridSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_grid.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class GridSettings(Settings):
    """Defaults applied to every grid that does not override them.

    Environment keys: ``GRID_ROWS_PER_PAGE``, ``GRID_PAGES_TO_DISPLAY``,
    ``GRID_DEFAULT_PAGE``.
    """

    _prefix: ClassVar[str] = "GRID"

    rows_per_page: int = 20
    pages_to_display: int = 5
    default_page: int = 1
    """Page used when a request carries none; ``0`` shows every row."""

    def _validate(self) -> None:
        if self.rows_per_page < 1:
            raise InvalidSettingValueError("rows_per_page", self.rows_per_page, "must be >= 1")
        if self.pages_to_display < 1:
            raise InvalidSettingValueError("pages_to_display", self.pages_to_display, "must be >= 1")
        if self.default_page < 0:
            raise InvalidSettingValueError("default_page", self.default_page, "must be >= 0")


__all__ = ["GridSettings", "Settings"]
