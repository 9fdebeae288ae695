"""Tests for the asset usage analyzer."""

from __future__ import annotations

from fluttertidy.analyzers import AssetAnalyzer

from tests._fixtures.project_builder import ProjectBuilder

_PUBSPEC = """
name: my_app
flutter:
  assets:
    - assets/images/
    - assets/icon.png
"""


def _project(project_builder: ProjectBuilder, files: dict[str, str]) -> None:
    project_builder.touch("assets/images/logo.png", "assets/icon.png")
    project_builder.write({"pubspec.yaml": _PUBSPEC, **files})


def test_alias_used_from_another_file_marks_asset_used(project_builder: ProjectBuilder) -> None:
    _project(
        project_builder,
        {
            "lib/paths.dart": """
            class Paths {
              static const logoPath = 'assets/images/logo.png';
            }
            """,
            "lib/home.dart": """
            import 'paths.dart';

            final logo = Image.asset(Paths.logoPath);
            """,
        },
    )

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == {"assets/images/logo.png"}
    assert report.unused == ["assets/icon.png"]
    assert report.references == {"assets/images/logo.png": ["lib/home.dart"]}


def test_literal_only_in_unused_alias_definition_is_unused(project_builder: ProjectBuilder) -> None:
    _project(
        project_builder,
        {
            "lib/paths.dart": """
            class Paths {
              static const logoPath = 'assets/images/logo.png';
            }
            """,
        },
    )

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == set()
    assert report.unused == ["assets/images/logo.png", "assets/icon.png"]


def test_direct_literal_reference_marks_asset_used(project_builder: ProjectBuilder) -> None:
    _project(
        project_builder,
        {
            "lib/main.dart": """
            void main() {
              Image.asset('assets/icon.png');
            }
            """,
        },
    )

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == {"assets/icon.png"}
    assert report.unused == ["assets/images/logo.png"]


def test_literal_outside_lib_is_not_a_use(project_builder: ProjectBuilder) -> None:
    _project(
        project_builder,
        {"test/widget_test.dart": "final icon = 'assets/icon.png';\n"},
    )

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == set()


def test_no_declared_assets_yields_empty_report(project_builder: ProjectBuilder) -> None:
    project_builder.write({"pubspec.yaml": "name: my_app\n", "lib/main.dart": "void main() {}\n"})

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.declared == []
    assert report.used == set()
    assert report.unused == []


def _write_duplicate_aliases(project_builder: ProjectBuilder, extra: dict[str, str]) -> None:
    project_builder.touch("assets/a.png", "assets/b.png")
    project_builder.write(
        {
            "pubspec.yaml": """
            name: my_app
            flutter:
              assets:
                - assets/a.png
                - assets/b.png
            """,
            "lib/a_paths.dart": """
            class Paths {
              static const logo = 'assets/a.png';
            }
            """,
            "lib/z_paths.dart": """
            class Paths {
              static const logo = 'assets/b.png';
            }
            """,
            **extra,
        }
    )


def test_duplicate_alias_declarations_do_not_mark_literals_used(
    project_builder: ProjectBuilder,
) -> None:
    _write_duplicate_aliases(project_builder, {})

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == set()
    assert report.unused == ["assets/a.png", "assets/b.png"]


def test_duplicate_alias_usage_counts_for_first_declaration_only(
    project_builder: ProjectBuilder,
) -> None:
    _write_duplicate_aliases(
        project_builder,
        {"lib/home.dart": "final logo = Image.asset(Paths.logo);\n"},
    )

    report = AssetAnalyzer().analyze(project_builder.context())

    assert report.used == {"assets/a.png"}
    assert report.unused == ["assets/b.png"]
    assert report.references == {"assets/a.png": ["lib/home.dart"]}
