"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ConfigurationError              (configuration.py)
        ├── UnsupportedFilterOperatorError
        ├── UnsupportedValueTypeError
        ├── DuplicateColumnError
        ├── InvalidPagingOptionError
        ├── LinkBuilderNotConfiguredError
        └── ConfigError                 (mp_grid.config.validation)

User-supplied filter text and page numbers never raise; they degrade to
empty results instead.
"""

from mp_grid.kernel.errors.base import BaseError
from mp_grid.kernel.errors.configuration import (
    ConfigurationError,
    DuplicateColumnError,
    InvalidPagingOptionError,
    LinkBuilderNotConfiguredError,
    UnsupportedFilterOperatorError,
    UnsupportedValueTypeError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "DuplicateColumnError",
    "InvalidPagingOptionError",
    "LinkBuilderNotConfiguredError",
    "UnsupportedFilterOperatorError",
    "UnsupportedValueTypeError",
]
