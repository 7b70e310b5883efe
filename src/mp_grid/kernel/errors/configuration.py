"""Configuration errors – raised while a grid is being set up, never mid-request."""

from __future__ import annotations

from typing import Any

from mp_grid.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """A grid, pipeline or pager was declared inconsistently."""

    default_code = "configuration_error"


class UnsupportedFilterOperatorError(ConfigurationError):
    """No filter is registered for an operator on a value kind."""

    default_code = "unsupported_filter_operator"

    def __init__(self, kind: Any, operator: Any, *, column: str | None = None, **kwargs: Any) -> None:
        kind_name = getattr(kind, "value", kind)
        operator_name = getattr(operator, "value", operator)
        message = f"Operator '{operator_name}' is not supported for '{kind_name}' values"
        detail: dict[str, Any] = {"kind": kind_name, "operator": operator_name}
        if column is not None:
            message = f"{message} (column '{column}')"
            detail["column"] = column
        super().__init__(message, detail=detail, **kwargs)
        self.kind = kind
        self.operator = operator
        self.column = column


class UnsupportedValueTypeError(ConfigurationError):
    """A column declares a Python type no value kind covers."""

    default_code = "unsupported_value_type"

    def __init__(self, value_type: Any, **kwargs: Any) -> None:
        type_name = getattr(value_type, "__name__", repr(value_type))
        super().__init__(
            f"Type '{type_name}' cannot be filtered",
            detail={"value_type": type_name},
            **kwargs,
        )
        self.value_type = value_type


class DuplicateColumnError(ConfigurationError):
    """Two columns of one grid share a name."""

    default_code = "duplicate_column"

    def __init__(self, column: str, **kwargs: Any) -> None:
        super().__init__(
            f"Column '{column}' is declared more than once",
            detail={"column": column},
            **kwargs,
        )
        self.column = column


class InvalidPagingOptionError(ConfigurationError):
    """Pager options are outside their valid range."""

    default_code = "invalid_paging_option"

    def __init__(self, option: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Paging option '{option}' has invalid value {value!r}: {reason}",
            detail={"option": option, "value": value},
            **kwargs,
        )
        self.option = option
        self.value = value
        self.reason = reason


class LinkBuilderNotConfiguredError(ConfigurationError):
    """A page link was requested from a pager built without a link builder."""

    default_code = "link_builder_not_configured"


__all__ = [
    "ConfigurationError",
    "DuplicateColumnError",
    "InvalidPagingOptionError",
    "LinkBuilderNotConfiguredError",
    "UnsupportedFilterOperatorError",
    "UnsupportedValueTypeError",
]
