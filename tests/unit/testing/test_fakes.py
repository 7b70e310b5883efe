"""Unit tests for the testing fakes."""

from __future__ import annotations

from mp_grid.application.processing import LinkBuilder
from mp_grid.application.query import QuerySource
from mp_grid.testing import CountingQuerySource, RecordingLinkBuilder


class TestRecordingLinkBuilder:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(RecordingLinkBuilder(), LinkBuilder)

    def test_records_calls(self) -> None:
        builder = RecordingLinkBuilder()
        assert builder.build_link("", "Page", 1) == "Page=1"
        assert builder.build_link("Grid", "Page-Grid", 4) == "Page-Grid=4"
        assert builder.calls == [("", "Page", 1), ("Grid", "Page-Grid", 4)]
        assert builder.call_count == 2


class TestCountingQuerySource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(CountingQuerySource([]), QuerySource)

    def test_counts_count_calls(self) -> None:
        source = CountingQuerySource([1, 2, 3])
        assert source.count() == 3
        assert source.count() == 3
        assert source.count_calls == 2

    def test_iteration_is_not_counted(self) -> None:
        source = CountingQuerySource([1, 2, 3])
        assert list(source) == [1, 2, 3]
        assert source.count_calls == 0

    def test_derived_sources_share_counter(self) -> None:
        root = CountingQuerySource([5, 1, 4, 2])
        derived = root.where(lambda n: n > 1).order_by(lambda n: n).take(2)
        assert isinstance(derived, CountingQuerySource)
        assert derived.to_list() == [2, 4]
        assert derived.count() == 2
        assert root.count_calls == 1
