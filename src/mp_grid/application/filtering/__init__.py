"""Application filtering – operators, value parsing, filter strategies and the catalog."""
from mp_grid.application.filtering.catalog import FilterCatalog, default_catalog
from mp_grid.application.filtering.filters import (
    EqualsFilter,
    GreaterThanFilter,
    GreaterThanOrEqualFilter,
    GridFilter,
    InFilter,
    LessThanFilter,
    LessThanOrEqualFilter,
    NotEqualsFilter,
    StringContainsFilter,
    StringEndsWithFilter,
    StringEqualsFilter,
    StringFilter,
    StringNotEqualsFilter,
    StringStartsWithFilter,
    ValueFilter,
)
from mp_grid.application.filtering.operators import FilterOperator, ValueKind
from mp_grid.application.filtering.values import UNPARSABLE, parse_value

__all__ = [
    "UNPARSABLE",
    "EqualsFilter",
    "FilterCatalog",
    "FilterOperator",
    "GreaterThanFilter",
    "GreaterThanOrEqualFilter",
    "GridFilter",
    "InFilter",
    "LessThanFilter",
    "LessThanOrEqualFilter",
    "NotEqualsFilter",
    "StringContainsFilter",
    "StringEndsWithFilter",
    "StringEqualsFilter",
    "StringFilter",
    "StringNotEqualsFilter",
    "StringStartsWithFilter",
    "ValueFilter",
    "ValueKind",
    "default_catalog",
    "parse_value",
]
