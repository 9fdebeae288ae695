"""Dependency usage analyzer."""

from __future__ import annotations

from typing import Dict, List

from .base import Analyzer
from ..context import AnalysisContext
from ..extractors import find_dependency_references
from ..logging import get_logger
from ..manifest import declared_dependencies
from ..models import DependencyUsageReport, UsageReport


class DependencyAnalyzer(Analyzer):
    """Checks pubspec dependencies against package imports across the project.

    Library, test, integration_test and stray root-level Dart files are all
    scanned; ordinary and dev dependencies share one predicate but are
    reported separately.
    """

    name = "dependencies"
    result_field = "dependencies"

    def __init__(self) -> None:
        self.logger = get_logger("analyzers.dependencies")

    def analyze(self, context: AnalysisContext) -> DependencyUsageReport:
        manifest = context.manifest
        names = declared_dependencies(manifest)
        if not names:
            return DependencyUsageReport()

        sources = context.read_all(context.project_files())
        found = find_dependency_references(sources, names)
        references: Dict[str, List[str]] = {
            name: [context.relative(path) for path in paths] for name, paths in found.items()
        }
        used = set(found)

        report = DependencyUsageReport(
            generic=UsageReport.partition(manifest.dependencies, used, references),
            dev=UsageReport.partition(manifest.dev_dependencies, used, references),
        )
        self.logger.debug(
            "Dependencies: %d/%d used, dev %d/%d used",
            len(report.generic.used),
            len(report.generic.declared),
            len(report.dev.used),
            len(report.dev.declared),
        )
        return report


__all__ = ["DependencyAnalyzer"]
