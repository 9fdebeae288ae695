"""Source file usage analyzer."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .base import Analyzer
from ..context import AnalysisContext
from ..extractors import extract_file_references
from ..logging import get_logger
from ..models import FileReference, FileUsageReport, ReferenceKind
from ..resolvers import ReachabilityResolver, find_entry_points


class FileAnalyzer(Analyzer):
    """Flags Dart files under lib/ that no directive refers to."""

    name = "files"
    result_field = "files"

    def __init__(self, mode: str | None = None) -> None:
        self.mode = mode
        self.logger = get_logger("analyzers.files")

    def analyze(self, context: AnalysisContext) -> FileUsageReport:
        files = context.library_files()
        references: List[FileReference] = []
        for source in context.read_all(files):
            references.extend(
                extract_file_references(source, context.root, context.package_name)
            )

        entry_points = find_entry_points(context.lib_dir, files)
        if not entry_points:
            self.logger.debug("No main.dart entry point found under %s", context.lib_dir)

        resolver = ReachabilityResolver(self.mode or context.config.reachability)
        closure = resolver.resolve(references, files, entry_points)

        referrers: Dict[Path, List[str]] = {}
        for reference in references:
            if reference.kind is ReferenceKind.LIBRARY:
                continue
            sources = referrers.setdefault(reference.target, [])
            rel = context.relative(reference.source)
            if rel not in sources:
                sources.append(rel)

        report = FileUsageReport.partition(
            [context.relative(path) for path in files],
            [context.relative(path) for path in closure],
            {context.relative(path): paths for path, paths in referrers.items()},
        )
        report.closure = {context.relative(path) for path in closure}
        report.entry_points = [context.relative(path) for path in entry_points]
        self.logger.debug("Files: %d collected, %d unused", len(files), len(report.unused))
        return report


__all__ = ["FileAnalyzer"]
