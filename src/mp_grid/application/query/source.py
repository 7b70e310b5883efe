"""Application query – QuerySource protocol and InMemoryQuerySource."""
from __future__ import annotations

import itertools
from typing import Any, Callable, Generic, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class QuerySource(Protocol[T]):
    """Lazily evaluated, orderable sequence of records.

    Every method returns a new source; the receiver is never mutated.
    """

    def where(self, predicate: Callable[[T], bool]) -> "QuerySource[T]": ...
    def order_by(self, key: Callable[[T], Any], *, descending: bool = False) -> "QuerySource[T]": ...
    def skip(self, count: int) -> "QuerySource[T]": ...
    def take(self, count: int) -> "QuerySource[T]": ...
    def count(self) -> int: ...
    def __iter__(self) -> Iterator[T]: ...


def _null_aware(key: Callable[[T], Any]) -> Callable[[T], tuple[bool, Any]]:
    def _key(item: T) -> tuple[bool, Any]:
        value = key(item)
        return (value is not None, value)

    return _key


class InMemoryQuerySource(Generic[T]):
    """:class:`QuerySource` over an in-memory iterable.

    Nothing is evaluated until the source is iterated or counted; each
    iteration re-runs the chain against *items*, so *items* must be
    re-iterable (a list, tuple, or another source).
    """

    def __init__(
        self,
        items: Iterable[T],
        _chain: Callable[[Iterable[T]], Iterable[T]] | None = None,
    ) -> None:
        self._items = items
        self._chain = _chain

    def _derive(self, step: Callable[[Iterable[T]], Iterable[T]]) -> "InMemoryQuerySource[T]":
        previous = self._chain
        if previous is None:
            return InMemoryQuerySource(self._items, step)
        return InMemoryQuerySource(self._items, lambda rows: step(previous(rows)))

    def where(self, predicate: Callable[[T], bool]) -> "InMemoryQuerySource[T]":
        return self._derive(lambda rows: (row for row in rows if predicate(row)))

    def order_by(self, key: Callable[[T], Any], *, descending: bool = False) -> "InMemoryQuerySource[T]":
        """Stable sort; ``None`` keys come first ascending and last descending."""
        sort_key = _null_aware(key)
        return self._derive(lambda rows: sorted(rows, key=sort_key, reverse=descending))

    def skip(self, count: int) -> "InMemoryQuerySource[T]":
        start = max(count, 0)
        return self._derive(lambda rows: itertools.islice(rows, start, None))

    def take(self, count: int) -> "InMemoryQuerySource[T]":
        stop = max(count, 0)
        return self._derive(lambda rows: itertools.islice(rows, stop))

    def count(self) -> int:
        return sum(1 for _ in self)

    def to_list(self) -> list[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        rows: Iterable[T] = self._items if self._chain is None else self._chain(self._items)
        return iter(rows)

    def __repr__(self) -> str:  # pragma: no cover
        return f"InMemoryQuerySource({self._items!r})"


__all__ = ["InMemoryQuerySource", "QuerySource"]
