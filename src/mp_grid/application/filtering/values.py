"""Application filtering – parsing raw filter text into native values.

Filter text comes from end users, so nothing here raises: text that does not
parse as the column's type yields :data:`UNPARSABLE`, and the filter built on
it matches nothing.
"""
from __future__ import annotations

import datetime
import enum
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from dateutil import parser as date_parser
from dateutil.parser import ParserError

from mp_grid.observability.logging import get_logger

logger = get_logger(__name__)


class _Unparsable:
    _instance: "_Unparsable | None" = None

    def __new__(cls) -> "_Unparsable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNPARSABLE"


UNPARSABLE: Any = _Unparsable()


def _parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_decimal(raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {raw!r}") from exc
    # NaN and sNaN trap when compared
    if value.is_nan():
        raise ValueError(f"not a number: {raw!r}")
    return value


def _parse_datetime(raw: str) -> datetime.datetime:
    return date_parser.parse(raw)


def _parse_date(raw: str) -> datetime.date:
    return date_parser.parse(raw).date()


def _enum_parser(enum_type: type[enum.Enum]) -> Callable[[str], enum.Enum]:
    def _parse(raw: str) -> enum.Enum:
        text = raw.strip()
        if text in enum_type.__members__:
            return enum_type[text]
        for member in enum_type:
            if str(member.value) == text:
                return member
        raise ValueError(f"not a {enum_type.__name__}: {raw!r}")

    return _parse


def parser_for(value_type: type) -> Callable[[str], Any]:
    """Return the text → *value_type* converter; it raises ``ValueError`` on bad text."""
    # order matters: bool is an int, datetime is a date, IntEnum is an int
    if issubclass(value_type, bool):
        return _parse_bool
    if issubclass(value_type, enum.Enum):
        return _enum_parser(value_type)
    if issubclass(value_type, str):
        return str
    if issubclass(value_type, int):
        return lambda raw: int(raw.strip())
    if issubclass(value_type, float):
        return lambda raw: float(raw.strip())
    if issubclass(value_type, Decimal):
        return _parse_decimal
    if issubclass(value_type, datetime.datetime):
        return _parse_datetime
    if issubclass(value_type, datetime.date):
        return _parse_date
    if issubclass(value_type, uuid.UUID):
        return lambda raw: uuid.UUID(raw.strip())
    return value_type


def parse_value(value_type: type, raw: str) -> Any:
    """Parse *raw* as *value_type*; :data:`UNPARSABLE` when it does not fit."""
    try:
        return parser_for(value_type)(raw)
    except (ValueError, TypeError, OverflowError, ParserError):
        logger.debug("grid.filter.unparsable_value", value_type=value_type.__name__, raw_value=raw)
        return UNPARSABLE


def parse_values(value_type: type, raw: str, separator: str = ",") -> list[Any]:
    """Parse each *separator*-delimited element of *raw*, dropping blanks and unparsable ones."""
    parsed = (parse_value(value_type, part) for part in raw.split(separator) if part.strip())
    return [value for value in parsed if value is not UNPARSABLE]


def align(field_value: Any, parsed: Any) -> Any:
    """Bring *parsed* to the same date/time shape as *field_value*.

    Date columns holding plain dates compare on the calendar day; naive
    datetimes compare against the wall-clock part of an aware filter value.
    """
    if isinstance(parsed, datetime.datetime):
        if isinstance(field_value, datetime.datetime):
            if field_value.tzinfo is None and parsed.tzinfo is not None:
                return parsed.replace(tzinfo=None)
            if field_value.tzinfo is not None and parsed.tzinfo is None:
                return parsed.replace(tzinfo=field_value.tzinfo)
            return parsed
        if isinstance(field_value, datetime.date):
            return parsed.date()
    elif isinstance(parsed, datetime.date) and isinstance(field_value, datetime.datetime):
        return datetime.datetime.combine(parsed, datetime.time(), tzinfo=field_value.tzinfo)
    return parsed


__all__ = ["UNPARSABLE", "align", "parse_value", "parse_values", "parser_for"]
