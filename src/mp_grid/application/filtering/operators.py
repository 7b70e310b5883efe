"""Application filtering – FilterOperator and ValueKind."""
from __future__ import annotations

import datetime
import enum
import uuid
from decimal import Decimal

from mp_grid.kernel.errors import UnsupportedValueTypeError


class FilterOperator(str, enum.Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not-equals"
    CONTAINS = "contains"
    STARTS_WITH = "starts-with"
    ENDS_WITH = "ends-with"
    GREATER_THAN = "greater-than"
    LESS_THAN = "less-than"
    GREATER_THAN_OR_EQUAL = "greater-than-or-equal"
    LESS_THAN_OR_EQUAL = "less-than-or-equal"
    IN = "in"

    @classmethod
    def parse(cls, text: str) -> "FilterOperator | None":
        """Return the operator spelled by *text* (case-insensitive), or ``None``."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class ValueKind(str, enum.Enum):
    """Type category a filter is selected by."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    IDENTIFIER = "identifier"
    ENUM = "enum"

    @classmethod
    def for_type(cls, value_type: type) -> "ValueKind":
        """Map a column's declared Python type to its kind.

        Raises:
            UnsupportedValueTypeError: *value_type* has no filterable kind.
        """
        # bool before the numeric check: bool is an int subclass
        if not isinstance(value_type, type):
            raise UnsupportedValueTypeError(value_type)
        if issubclass(value_type, bool):
            return cls.BOOLEAN
        if issubclass(value_type, enum.Enum):
            return cls.ENUM
        if issubclass(value_type, str):
            return cls.STRING
        if issubclass(value_type, (int, float, Decimal)):
            return cls.NUMBER
        if issubclass(value_type, (datetime.date, datetime.datetime)):
            return cls.DATE
        if issubclass(value_type, uuid.UUID):
            return cls.IDENTIFIER
        raise UnsupportedValueTypeError(value_type)


ORDERING_OPERATORS: frozenset[FilterOperator] = frozenset({
    FilterOperator.GREATER_THAN,
    FilterOperator.LESS_THAN,
    FilterOperator.GREATER_THAN_OR_EQUAL,
    FilterOperator.LESS_THAN_OR_EQUAL,
})


__all__ = ["ORDERING_OPERATORS", "FilterOperator", "ValueKind"]
