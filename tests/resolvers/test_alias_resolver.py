"""Tests for two-pass alias resolution."""

from __future__ import annotations

from pathlib import Path

from fluttertidy.models import AliasDeclaration, SourceFile
from fluttertidy.resolvers import AliasResolver

_ROOT = Path("/project/lib")

_PATHS = SourceFile(
    _ROOT / "paths.dart",
    "class Paths {\n  static const logo = 'assets/logo.png';\n  static const icon = 'assets/icon.png';\n}\n"
    "final preview = Paths.icon;\n",
)


def _declaration(alias: str, literal: str, defining: Path = _PATHS.path) -> AliasDeclaration:
    return AliasDeclaration("Paths", alias, literal, defining)


def test_usage_in_another_file_marks_alias_used() -> None:
    home = SourceFile(_ROOT / "home.dart", "Image.asset(Paths.logo);\n")

    resolution = AliasResolver().resolve(
        [_declaration("logo", "assets/logo.png"), _declaration("icon", "assets/icon.png")],
        [_PATHS, home],
    )

    assert resolution.definitions == {
        "Paths.logo": _PATHS.path,
        "Paths.icon": _PATHS.path,
    }
    assert resolution.used == {"Paths.logo"}
    assert resolution.usages == {"Paths.logo": [home.path]}


def test_usage_only_inside_defining_file_does_not_count() -> None:
    resolution = AliasResolver().resolve([_declaration("icon", "assets/icon.png")], [_PATHS])

    assert resolution.used == set()
    assert resolution.unresolved == []


def test_alias_without_defining_file_is_unresolved() -> None:
    stray = _declaration("banner", "assets/banner.png")
    home = SourceFile(_ROOT / "home.dart", "Image.asset(Paths.banner);\n")

    resolution = AliasResolver().resolve([stray], [_PATHS, home])

    assert resolution.unresolved == ["Paths.banner"]
    assert "Paths.banner" not in resolution.used


def test_duplicate_keys_keep_first_file_in_sorted_order() -> None:
    first = SourceFile(
        _ROOT / "a_paths.dart",
        "class Paths {\n  static const logo = 'assets/logo.png';\n}\n",
    )
    second = SourceFile(
        _ROOT / "z_paths.dart",
        "class Paths {\n  static const logo = 'assets/logo_v2.png';\n}\n",
    )
    user = SourceFile(_ROOT / "home.dart", "Paths.logo;\n")

    resolution = AliasResolver().resolve(
        [
            _declaration("logo", "assets/logo_v2.png", second.path),
            _declaration("logo", "assets/logo.png", first.path),
        ],
        [second, user, first],
    )

    assert resolution.definitions == {"Paths.logo": first.path}
    assert resolution.duplicates == {"Paths.logo": [first.path, second.path]}
    assert resolution.usages == {"Paths.logo": [user.path]}
