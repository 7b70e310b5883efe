"""Unit tests for composable predicates."""

from __future__ import annotations

from mp_grid.kernel.predicate import (
    MATCH_ALL,
    MATCH_NOTHING,
    ConstantPredicate,
    LambdaPredicate,
    all_of,
)

is_even = LambdaPredicate(lambda n: n % 2 == 0, name="even")
is_positive = LambdaPredicate(lambda n: n > 0, name="positive")


class TestLambdaPredicate:
    def test_call_delegates_to_callable(self) -> None:
        assert is_even(4)
        assert not is_even(3)

    def test_is_satisfied_by(self) -> None:
        assert is_positive.is_satisfied_by(1)

    def test_name_defaults_to_function_name(self) -> None:
        def long_enough(s: str) -> bool:
            return len(s) > 3

        assert LambdaPredicate(long_enough).name == "long_enough"


class TestCombinators:
    def test_and(self) -> None:
        both = is_even & is_positive
        assert both(2)
        assert not both(-2)
        assert not both(3)

    def test_or(self) -> None:
        either = is_even | is_positive
        assert either(-2)
        assert either(3)
        assert not either(-3)

    def test_not(self) -> None:
        odd = ~is_even
        assert odd(3)
        assert not odd(2)

    def test_usable_with_builtin_filter(self) -> None:
        assert list(filter(is_even & is_positive, [-2, -1, 0, 1, 2, 4])) == [2, 4]


class TestConstants:
    def test_match_all(self) -> None:
        assert MATCH_ALL(None)
        assert MATCH_ALL("anything")

    def test_match_nothing(self) -> None:
        assert not MATCH_NOTHING(None)
        assert not MATCH_NOTHING(0)

    def test_constant_result_attribute(self) -> None:
        assert ConstantPredicate(True).result is True


class TestAllOf:
    def test_empty_matches_everything(self) -> None:
        assert all_of([])(object())

    def test_single_predicate_returned_as_is(self) -> None:
        assert all_of([is_even]) is is_even

    def test_conjunction(self) -> None:
        combined = all_of([is_even, is_positive, LambdaPredicate(lambda n: n < 10)])
        assert [n for n in range(-4, 14) if combined(n)] == [2, 4, 6, 8]

    def test_any_match_nothing_short_circuits_to_empty(self) -> None:
        combined = all_of([is_even, MATCH_NOTHING])
        assert not any(combined(n) for n in range(10))
