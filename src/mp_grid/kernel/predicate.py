"""Predicates – composable boolean tests over grid records."""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class Predicate(abc.ABC, Generic[T]):
    """Abstract base for predicates – provides operator overloads.

    Predicates are callable, so they can be handed straight to ``filter()``
    or to :meth:`QuerySource.where`.

    Example::

        adults = LambdaPredicate(lambda p: p.age is not None and p.age >= 18)
        named = LambdaPredicate(lambda p: bool(p.name))
        rows = source.where(adults & named)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "Predicate[T]") -> "Predicate[T]":
        return AndPredicate(self, other)

    def __or__(self, other: "Predicate[T]") -> "Predicate[T]":
        return OrPredicate(self, other)

    def __invert__(self) -> "Predicate[T]":
        return NotPredicate(self)


class AndPredicate(Predicate[T]):
    """Conjunction of two predicates."""

    def __init__(self, left: Predicate[T], right: Predicate[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class OrPredicate(Predicate[T]):
    """Disjunction of two predicates."""

    def __init__(self, left: Predicate[T], right: Predicate[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)


class NotPredicate(Predicate[T]):
    """Negation of a predicate."""

    def __init__(self, inner: Predicate[T]) -> None:
        self._inner = inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._inner.is_satisfied_by(candidate)


class LambdaPredicate(Predicate[T]):
    """Wraps a plain callable as a ``Predicate``."""

    def __init__(self, test: Callable[[T], bool], *, name: str = "") -> None:
        self._test = test
        self.name: str = name or getattr(test, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._test(candidate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaPredicate({self.name!r})"


class ConstantPredicate(Predicate[T]):
    """Ignores the candidate and always answers *result*."""

    def __init__(self, result: bool) -> None:
        self.result = result

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return self.result

    def __repr__(self) -> str:  # pragma: no cover
        return f"ConstantPredicate({self.result!r})"


MATCH_ALL: Predicate = ConstantPredicate(True)
MATCH_NOTHING: Predicate = ConstantPredicate(False)


def all_of(predicates: Iterable[Predicate[T]]) -> Predicate[T]:
    """Fold *predicates* into one conjunction; an empty sequence matches everything."""
    combined: Predicate[T] | None = None
    for predicate in predicates:
        combined = predicate if combined is None else combined & predicate
    return combined if combined is not None else MATCH_ALL


__all__ = [
    "MATCH_ALL",
    "MATCH_NOTHING",
    "AndPredicate",
    "ConstantPredicate",
    "LambdaPredicate",
    "NotPredicate",
    "OrPredicate",
    "Predicate",
    "all_of",
]
