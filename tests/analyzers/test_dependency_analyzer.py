"""Tests for the dependency usage analyzer."""

from __future__ import annotations

from fluttertidy.analyzers import DependencyAnalyzer

from tests._fixtures.project_builder import ProjectBuilder

_PUBSPEC = """
name: my_app
dependencies:
  flutter:
    sdk: flutter
  http: ^1.1.0
  unused_pkg: ^0.1.0
  foo_bar: ^2.0.0
dev_dependencies:
  flutter_test:
    sdk: flutter
  mocktail: ^1.0.0
  build_runner: ^2.4.0
"""


def test_dependencies_are_split_into_used_and_unused(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "pubspec.yaml": _PUBSPEC,
            "lib/main.dart": "import 'package:http/http.dart' as http;\n",
            "lib/src/bar.dart": "import 'package:foo/bar.dart';\n",
            "test/api_test.dart": "import 'package:mocktail/mocktail.dart';\n",
        }
    )

    report = DependencyAnalyzer().analyze(project_builder.context())

    assert report.generic.used == {"http", "foo_bar"}
    assert report.generic.unused == ["unused_pkg"]
    assert report.dev.used == {"mocktail"}
    assert report.dev.unused == ["build_runner"]
    assert report.generic.references["http"] == ["lib/main.dart"]
    assert report.dev.references["mocktail"] == ["test/api_test.dart"]


def test_stray_root_dart_files_are_scanned(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "pubspec.yaml": _PUBSPEC,
            "tool/codegen.dart": "import 'package:build_runner/build_runner.dart';\n",
        }
    )

    report = DependencyAnalyzer().analyze(project_builder.context())

    assert "build_runner" in report.dev.used


def test_missing_manifest_yields_empty_partitions(project_builder: ProjectBuilder) -> None:
    project_builder.write({"lib/main.dart": "import 'package:http/http.dart';\n"})

    report = DependencyAnalyzer().analyze(project_builder.context())

    assert report.generic.declared == []
    assert report.dev.declared == []
