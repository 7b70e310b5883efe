"""Kernel errors – BaseError, root of every error a grid raises.

Grid errors are raised while a grid is being declared or configured, never
for end-user request text. Each carries a stable ``code`` slug and a
``detail`` dict naming the column, operator or setting involved, so a host
can log it or turn it into an error response unchanged::

    try:
        Grid([GridColumn.attribute("active", bool, operators={FilterOperator.CONTAINS})])
    except BaseError as exc:
        exc.to_dict()
        # {"code": "unsupported_filter_operator",
        #  "message": "Operator 'contains' is not supported for 'boolean' values (column 'active')",
        #  "detail": {"kind": "boolean", "operator": "contains", "column": "active"}}
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the mp-grid error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; subclasses set ``default_code``.
        detail: Grid context (column, operator, value kind, setting).
        cause: Lower-level exception this error wraps.
    """

    default_code: str = "grid_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, detail={self.detail!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured logs and error responses.

        ``cause`` appears only when the error wraps another exception.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
