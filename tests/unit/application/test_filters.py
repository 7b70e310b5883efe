"""Unit tests for filter strategies."""

from __future__ import annotations

import dataclasses
import datetime
import enum
import uuid
from decimal import Decimal
from typing import Any

import pytest

from mp_grid.application.filtering import (
    EqualsFilter,
    GreaterThanFilter,
    GreaterThanOrEqualFilter,
    InFilter,
    LessThanFilter,
    LessThanOrEqualFilter,
    NotEqualsFilter,
    StringContainsFilter,
    StringEndsWithFilter,
    StringEqualsFilter,
    StringNotEqualsFilter,
    StringStartsWithFilter,
)
from mp_grid.kernel.predicate import MATCH_NOTHING


@dataclasses.dataclass
class Row:
    text: str | None = None
    number: Any = None
    when: Any = None
    flag: bool | None = None
    ident: uuid.UUID | None = None
    colour: Any = None


class Colour(enum.Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


TEXTS = [None, "", "foo", "FOO", "Food", "bar", "xfoo"]
ROWS = [Row(text=t) for t in TEXTS]


def text_of(row: Row) -> str | None:
    return row.text


def matching(filter_type: type, raw: str | None, rows: list[Row] = ROWS, **kwargs: Any) -> list[Any]:
    predicate = filter_type(accessor=text_of, raw_value=raw, **kwargs).predicate()
    return [row.text for row in rows if predicate(row)]


# ---------------------------------------------------------------------------
# String filters
# ---------------------------------------------------------------------------


class TestStringEqualsFilter:
    def test_case_insensitive(self) -> None:
        assert matching(StringEqualsFilter, "foo") == ["foo", "FOO"]

    def test_null_field_never_matches_non_empty_value(self) -> None:
        assert None not in matching(StringEqualsFilter, "foo")

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_value_matches_null_or_empty(self, raw: str | None) -> None:
        assert matching(StringEqualsFilter, raw) == [None, ""]


class TestStringNotEqualsFilter:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_value_matches_non_null_non_empty(self, raw: str | None) -> None:
        assert matching(StringNotEqualsFilter, raw) == ["foo", "FOO", "Food", "bar", "xfoo"]

    def test_value_matches_null_or_different(self) -> None:
        assert matching(StringNotEqualsFilter, "X") == TEXTS

    def test_value_excludes_case_insensitive_equal(self) -> None:
        assert matching(StringNotEqualsFilter, "Foo") == [None, "", "Food", "bar", "xfoo"]

    def test_is_exact_negation_of_equals_for_non_empty_value(self) -> None:
        equals = set(map(id, (r for r in ROWS if StringEqualsFilter(text_of, "foo").predicate()(r))))
        not_equals = set(map(id, (r for r in ROWS if StringNotEqualsFilter(text_of, "foo").predicate()(r))))
        assert equals.isdisjoint(not_equals)
        assert len(equals | not_equals) == len(ROWS)


class TestStringPatternFilters:
    def test_contains(self) -> None:
        assert matching(StringContainsFilter, "oo") == ["foo", "FOO", "Food", "xfoo"]

    def test_starts_with(self) -> None:
        assert matching(StringStartsWithFilter, "FO") == ["foo", "FOO", "Food"]

    def test_ends_with(self) -> None:
        assert matching(StringEndsWithFilter, "Foo") == ["foo", "FOO", "xfoo"]

    @pytest.mark.parametrize("filter_type", [StringContainsFilter, StringStartsWithFilter, StringEndsWithFilter])
    def test_null_never_matches(self, filter_type: type) -> None:
        assert None not in matching(filter_type, "o")

    @pytest.mark.parametrize("filter_type", [StringContainsFilter, StringStartsWithFilter, StringEndsWithFilter])
    def test_empty_value_places_no_restriction(self, filter_type: type) -> None:
        assert matching(filter_type, "") == TEXTS
        assert matching(filter_type, None) == TEXTS

    def test_uses_upper_case_folding(self) -> None:
        rows = [Row(text="straße")]
        assert matching(StringContainsFilter, "STRASSE", rows) == ["straße"]


class TestFilterImmutability:
    def test_filters_are_frozen(self) -> None:
        f = StringEqualsFilter(text_of, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.raw_value = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Value filters
# ---------------------------------------------------------------------------


NUMBERS = [Row(number=n) for n in (None, 1, 5, 10)]


def numbers(filter_type: type, raw: str | None, value_type: type = int) -> list[Any]:
    predicate = filter_type(lambda r: r.number, raw, value_type).predicate()
    return [r.number for r in NUMBERS if predicate(r)]


class TestNumberFilters:
    def test_equals(self) -> None:
        assert numbers(EqualsFilter, "5") == [5]

    def test_not_equals_includes_null(self) -> None:
        assert numbers(NotEqualsFilter, "5") == [None, 1, 10]

    def test_greater_than(self) -> None:
        assert numbers(GreaterThanFilter, "1") == [5, 10]

    def test_less_than(self) -> None:
        assert numbers(LessThanFilter, "10") == [1, 5]

    def test_greater_than_or_equal(self) -> None:
        assert numbers(GreaterThanOrEqualFilter, "5") == [5, 10]

    def test_less_than_or_equal(self) -> None:
        assert numbers(LessThanOrEqualFilter, "5") == [1, 5]

    def test_decimal_column(self) -> None:
        rows = [Row(number=Decimal("1.10")), Row(number=Decimal("2.5"))]
        predicate = GreaterThanFilter(lambda r: r.number, "1.1", Decimal).predicate()
        assert [r.number for r in rows if predicate(r)] == [Decimal("2.5")]

    @pytest.mark.parametrize(
        ("filter_type", "raw"),
        [
            (GreaterThanFilter, "NaN"),
            (LessThanOrEqualFilter, "nan"),
            (EqualsFilter, "sNaN"),
            (NotEqualsFilter, "sNaN"),
        ],
    )
    def test_decimal_nan_matches_nothing(self, filter_type: type, raw: str) -> None:
        rows = [Row(number=Decimal("1")), Row(number=Decimal("5"))]
        predicate = filter_type(lambda r: r.number, raw, Decimal).predicate()
        assert predicate is MATCH_NOTHING
        assert [r for r in rows if predicate(r)] == []

    def test_decimal_in_drops_nan(self) -> None:
        rows = [Row(number=Decimal("1")), Row(number=Decimal("5"))]
        predicate = InFilter(lambda r: r.number, "1,sNaN", Decimal).predicate()
        assert [r.number for r in rows if predicate(r)] == [Decimal("1")]

    @pytest.mark.parametrize(
        "filter_type",
        [EqualsFilter, NotEqualsFilter, GreaterThanFilter, LessThanFilter, GreaterThanOrEqualFilter, LessThanOrEqualFilter],
    )
    def test_unparsable_matches_nothing(self, filter_type: type) -> None:
        assert numbers(filter_type, "five") == []
        assert filter_type(lambda r: r.number, "five", int).predicate() is MATCH_NOTHING

    @pytest.mark.parametrize(
        "filter_type", [GreaterThanFilter, LessThanFilter, GreaterThanOrEqualFilter, LessThanOrEqualFilter]
    )
    def test_ordering_never_matches_null(self, filter_type: type) -> None:
        assert None not in numbers(filter_type, "5")

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_empty_equals_matches_null(self, raw: str | None) -> None:
        assert numbers(EqualsFilter, raw) == [None]

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_not_equals_matches_non_null(self, raw: str | None) -> None:
        assert numbers(NotEqualsFilter, raw) == [1, 5, 10]

    def test_empty_ordering_matches_nothing(self) -> None:
        assert numbers(GreaterThanFilter, "") == []


class TestDateFilters:
    rows = [
        Row(when=datetime.date(2024, 1, 1)),
        Row(when=datetime.date(2024, 6, 1)),
        Row(when=None),
    ]

    def _dates(self, filter_type: type, raw: str, value_type: type = datetime.date) -> list[Any]:
        predicate = filter_type(lambda r: r.when, raw, value_type).predicate()
        return [r.when for r in self.rows if predicate(r)]

    def test_greater_than(self) -> None:
        assert self._dates(GreaterThanFilter, "2024-03-01") == [datetime.date(2024, 6, 1)]

    def test_equals(self) -> None:
        assert self._dates(EqualsFilter, "2024-01-01") == [datetime.date(2024, 1, 1)]

    def test_unparsable(self) -> None:
        assert self._dates(LessThanFilter, "yesterday-ish") == []

    def test_datetime_column_against_date_text(self) -> None:
        rows = [Row(when=datetime.datetime(2024, 1, 1, 9)), Row(when=datetime.datetime(2023, 12, 31, 23))]
        predicate = GreaterThanOrEqualFilter(lambda r: r.when, "2024-01-01", datetime.datetime).predicate()
        assert [r.when for r in rows if predicate(r)] == [datetime.datetime(2024, 1, 1, 9)]


class TestBooleanFilters:
    rows = [Row(flag=True), Row(flag=False), Row(flag=None)]

    def test_equals_true(self) -> None:
        predicate = EqualsFilter(lambda r: r.flag, "TRUE", bool).predicate()
        assert [r.flag for r in self.rows if predicate(r)] == [True]

    def test_not_equals_true(self) -> None:
        predicate = NotEqualsFilter(lambda r: r.flag, "true", bool).predicate()
        assert [r.flag for r in self.rows if predicate(r)] == [False, None]

    def test_unparsable(self) -> None:
        assert EqualsFilter(lambda r: r.flag, "maybe", bool).predicate() is MATCH_NOTHING


class TestIdentifierFilters:
    a, b = uuid.uuid4(), uuid.uuid4()

    def test_equals(self) -> None:
        rows = [Row(ident=self.a), Row(ident=self.b), Row()]
        predicate = EqualsFilter(lambda r: r.ident, str(self.b).upper(), uuid.UUID).predicate()
        assert [r.ident for r in rows if predicate(r)] == [self.b]


# ---------------------------------------------------------------------------
# Set membership
# ---------------------------------------------------------------------------


class TestInFilter:
    def test_numbers(self) -> None:
        assert numbers(InFilter, "1, 10") == [1, 10]

    def test_unparsable_elements_dropped(self) -> None:
        assert numbers(InFilter, "x,5") == [5]

    @pytest.mark.parametrize("raw", [None, "", " , ", "x,y"])
    def test_empty_set_matches_nothing(self, raw: str | None) -> None:
        assert numbers(InFilter, raw) == []

    def test_enum_members(self) -> None:
        rows = [Row(colour=c) for c in (Colour.RED, Colour.GREEN, Colour.BLUE, None)]
        predicate = InFilter(lambda r: r.colour, "RED,b", Colour).predicate()
        assert [r.colour for r in rows if predicate(r)] == [Colour.RED, Colour.BLUE]

    def test_identifiers(self) -> None:
        a, b, c = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        rows = [Row(ident=a), Row(ident=b), Row(ident=c)]
        predicate = InFilter(lambda r: r.ident, f"{a},{c}", uuid.UUID).predicate()
        assert [r.ident for r in rows if predicate(r)] == [a, c]
