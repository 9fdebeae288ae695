"""Tests for file reachability."""

from __future__ import annotations

from pathlib import Path

import pytest

from fluttertidy.models import FileReference, ReferenceKind
from fluttertidy.resolvers import ReachabilityResolver, find_entry_points

LIB = Path("/project/lib")
MAIN = LIB / "main.dart"
HOME = LIB / "home.dart"
WIDGET = LIB / "widget.dart"
ORPHAN = LIB / "orphan.dart"
ORPHAN_DEP = LIB / "orphan_dep.dart"
MODEL = LIB / "model.dart"
MODEL_PART = LIB / "model.g.dart"

UNIVERSE = [MAIN, HOME, WIDGET, ORPHAN, ORPHAN_DEP, MODEL, MODEL_PART]

REFERENCES = [
    FileReference(ReferenceKind.IMPORT, MAIN, HOME),
    FileReference(ReferenceKind.EXPORT, HOME, WIDGET),
    FileReference(ReferenceKind.IMPORT, ORPHAN, ORPHAN_DEP),
    FileReference(ReferenceKind.PART_OF, MODEL_PART, MODEL),
]


def test_find_entry_points_matches_main_and_flavors_under_lib_only() -> None:
    files = [MAIN, LIB / "main_dev.dart", LIB / "src" / "main.dart", LIB / "domain.dart"]

    assert find_entry_points(LIB, files) == [MAIN, LIB / "main_dev.dart"]


def test_direct_mode_counts_any_referenced_file() -> None:
    closure = ReachabilityResolver("direct").resolve(REFERENCES, UNIVERSE, [MAIN])

    assert closure == {MAIN, HOME, WIDGET, ORPHAN_DEP, MODEL, MODEL_PART}


def test_transitive_mode_walks_from_entry_points() -> None:
    closure = ReachabilityResolver("transitive").resolve(REFERENCES, UNIVERSE, [MAIN])

    assert closure == {MAIN, HOME, WIDGET}


def test_transitive_mode_pulls_in_parts_of_reachable_library() -> None:
    references = [
        *REFERENCES,
        FileReference(ReferenceKind.IMPORT, HOME, MODEL),
    ]

    closure = ReachabilityResolver("transitive").resolve(references, UNIVERSE, [MAIN])

    assert {MODEL, MODEL_PART} <= closure
    assert ORPHAN not in closure


def test_transitive_mode_treats_library_files_as_roots() -> None:
    references = [
        FileReference(ReferenceKind.LIBRARY, MODEL, MODEL),
        FileReference(ReferenceKind.PART, MODEL, MODEL_PART),
    ]

    closure = ReachabilityResolver("transitive").resolve(references, UNIVERSE, [])

    assert closure == {MODEL, MODEL_PART}


def test_closure_is_limited_to_universe() -> None:
    outside = Path("/project/test/helper.dart")
    references = [FileReference(ReferenceKind.IMPORT, MAIN, outside)]

    assert ReachabilityResolver().resolve(references, [MAIN], [MAIN]) == {MAIN}


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        ReachabilityResolver("sideways")
