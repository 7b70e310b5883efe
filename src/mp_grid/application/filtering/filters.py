"""Application filtering – filter strategies.

A filter pairs a field accessor with the raw text a user typed and turns them
into a :class:`~mp_grid.kernel.predicate.Predicate` over whole records. Each
strategy is a small frozen dataclass; the predicate it builds is a plain
closure, so evaluation does no lookups beyond calling the accessor.
"""
from __future__ import annotations

import abc
import dataclasses
import operator as op
from typing import Any, Callable, ClassVar, Generic, TypeVar

from mp_grid.application.filtering.operators import FilterOperator
from mp_grid.application.filtering.values import UNPARSABLE, align, parse_value, parse_values
from mp_grid.kernel.predicate import MATCH_ALL, MATCH_NOTHING, LambdaPredicate, Predicate

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class GridFilter(abc.ABC, Generic[T]):
    """Base for all filter strategies."""

    accessor: Callable[[T], Any]
    raw_value: str | None = None
    value_type: type = str

    operator: ClassVar[FilterOperator]

    @abc.abstractmethod
    def predicate(self) -> Predicate[T]: ...

    def _name(self) -> str:
        return f"{self.operator.value}:{self.raw_value!r}"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class StringFilter(GridFilter[T]):
    """Case-insensitive text comparison; both sides are upper-cased."""

    null_matches: ClassVar[bool] = False

    @abc.abstractmethod
    def matches(self, value: str, needle: str) -> bool: ...

    def empty_value_predicate(self) -> Predicate[T]:
        return MATCH_ALL

    def predicate(self) -> Predicate[T]:
        if not self.raw_value:
            return self.empty_value_predicate()
        accessor = self.accessor
        needle = self.raw_value.upper()
        null_matches = self.null_matches
        matches = self.matches

        def _test(record: T) -> bool:
            value = accessor(record)
            if value is None:
                return null_matches
            return matches(str(value).upper(), needle)

        return LambdaPredicate(_test, name=self._name())


@dataclasses.dataclass(frozen=True)
class StringEqualsFilter(StringFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.EQUALS

    def matches(self, value: str, needle: str) -> bool:
        return value == needle

    def empty_value_predicate(self) -> Predicate[T]:
        accessor = self.accessor
        return LambdaPredicate(lambda record: accessor(record) in (None, ""), name=self._name())


@dataclasses.dataclass(frozen=True)
class StringNotEqualsFilter(StringFilter[T]):
    """Logical negation of :class:`StringEqualsFilter`, nulls included."""

    operator: ClassVar[FilterOperator] = FilterOperator.NOT_EQUALS
    null_matches: ClassVar[bool] = True

    def matches(self, value: str, needle: str) -> bool:
        return value != needle

    def empty_value_predicate(self) -> Predicate[T]:
        accessor = self.accessor
        return LambdaPredicate(lambda record: accessor(record) not in (None, ""), name=self._name())


@dataclasses.dataclass(frozen=True)
class StringContainsFilter(StringFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.CONTAINS

    def matches(self, value: str, needle: str) -> bool:
        return needle in value


@dataclasses.dataclass(frozen=True)
class StringStartsWithFilter(StringFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.STARTS_WITH

    def matches(self, value: str, needle: str) -> bool:
        return value.startswith(needle)


@dataclasses.dataclass(frozen=True)
class StringEndsWithFilter(StringFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.ENDS_WITH

    def matches(self, value: str, needle: str) -> bool:
        return value.endswith(needle)


# ---------------------------------------------------------------------------
# Numbers, dates, booleans, identifiers, enums
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class ValueFilter(GridFilter[T]):
    """Compares the field against the raw text parsed as ``value_type``.

    Unparsable text matches nothing. Null fields only ever satisfy
    ``not-equals``.
    """

    compare: ClassVar[Callable[[Any, Any], bool]]
    null_matches: ClassVar[bool] = False

    def empty_value_predicate(self) -> Predicate[T]:
        return MATCH_NOTHING

    def predicate(self) -> Predicate[T]:
        if self.raw_value is None or not self.raw_value.strip():
            return self.empty_value_predicate()
        parsed = parse_value(self.value_type, self.raw_value)
        if parsed is UNPARSABLE:
            return MATCH_NOTHING
        accessor = self.accessor
        compare = self.compare
        null_matches = self.null_matches

        def _test(record: T) -> bool:
            value = accessor(record)
            if value is None:
                return null_matches
            return compare(value, align(value, parsed))

        return LambdaPredicate(_test, name=self._name())


@dataclasses.dataclass(frozen=True)
class EqualsFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.EQUALS
    compare: ClassVar[Callable[[Any, Any], bool]] = op.eq

    def empty_value_predicate(self) -> Predicate[T]:
        accessor = self.accessor
        return LambdaPredicate(lambda record: accessor(record) is None, name=self._name())


@dataclasses.dataclass(frozen=True)
class NotEqualsFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.NOT_EQUALS
    compare: ClassVar[Callable[[Any, Any], bool]] = op.ne
    null_matches: ClassVar[bool] = True

    def empty_value_predicate(self) -> Predicate[T]:
        accessor = self.accessor
        return LambdaPredicate(lambda record: accessor(record) is not None, name=self._name())


@dataclasses.dataclass(frozen=True)
class GreaterThanFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.GREATER_THAN
    compare: ClassVar[Callable[[Any, Any], bool]] = op.gt


@dataclasses.dataclass(frozen=True)
class LessThanFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.LESS_THAN
    compare: ClassVar[Callable[[Any, Any], bool]] = op.lt


@dataclasses.dataclass(frozen=True)
class GreaterThanOrEqualFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.GREATER_THAN_OR_EQUAL
    compare: ClassVar[Callable[[Any, Any], bool]] = op.ge


@dataclasses.dataclass(frozen=True)
class LessThanOrEqualFilter(ValueFilter[T]):
    operator: ClassVar[FilterOperator] = FilterOperator.LESS_THAN_OR_EQUAL
    compare: ClassVar[Callable[[Any, Any], bool]] = op.le


# ---------------------------------------------------------------------------
# Set membership
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class InFilter(GridFilter[T]):
    """Field equals any element of a comma-separated list.

    Elements that do not parse are dropped; if none remain, nothing matches.
    """

    operator: ClassVar[FilterOperator] = FilterOperator.IN
    separator: ClassVar[str] = ","

    def predicate(self) -> Predicate[T]:
        if not self.raw_value:
            return MATCH_NOTHING
        allowed = parse_values(self.value_type, self.raw_value, self.separator)
        if not allowed:
            return MATCH_NOTHING
        accessor = self.accessor

        def _test(record: T) -> bool:
            value = accessor(record)
            if value is None:
                return False
            return any(value == align(value, candidate) for candidate in allowed)

        return LambdaPredicate(_test, name=self._name())


__all__ = [
    "EqualsFilter",
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
]
