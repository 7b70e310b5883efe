"""Testing support – in-memory doubles for the grid's collaborators."""

from mp_grid.testing.fakes import CountingQuerySource, RecordingLinkBuilder

__all__ = ["CountingQuerySource", "RecordingLinkBuilder"]
