"""Tests for analyzer discovery utilities."""

from __future__ import annotations

import pytest

from fluttertidy.analyzers import (
    AssetAnalyzer,
    DependencyAnalyzer,
    FileAnalyzer,
    discover_analyzers,
)


def test_discover_analyzers_returns_builtin_analyzers() -> None:
    analyzers = discover_analyzers()
    classes = [type(analyzer) for analyzer in analyzers]
    assert classes == [AssetAnalyzer, FileAnalyzer, DependencyAnalyzer]


def test_discover_analyzers_respects_enabled_filter() -> None:
    analyzers = discover_analyzers(["Files"])
    assert len(analyzers) == 1
    assert isinstance(analyzers[0], FileAnalyzer)


def test_discover_analyzers_with_empty_filter_returns_nothing() -> None:
    assert discover_analyzers([]) == []


def test_discover_analyzers_raises_for_unknown_name() -> None:
    with pytest.raises(ValueError):
        discover_analyzers(["does-not-exist"])
