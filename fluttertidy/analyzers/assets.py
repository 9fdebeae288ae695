"""Asset usage analyzer."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Set

from .base import Analyzer
from ..context import AnalysisContext
from ..extractors import extract_alias_declarations, find_literal_references
from ..logging import get_logger
from ..models import AliasDeclaration, UsageReport
from ..resolvers import AliasResolver


class AssetAnalyzer(Analyzer):
    """Classifies pubspec assets by direct and alias-mediated references in lib/.

    An asset is used when an alias bound to it is referenced from outside its
    defining file, or when its path literal appears in a file that declares
    no alias bound to it.
    """

    name = "assets"
    result_field = "assets"

    def __init__(self, resolver: AliasResolver | None = None) -> None:
        self.resolver = resolver or AliasResolver()
        self.logger = get_logger("analyzers.assets")

    def analyze(self, context: AnalysisContext) -> UsageReport:
        declared = list(context.manifest.assets)
        if not declared:
            return UsageReport.partition([], [])

        sources = context.read_all(context.library_files())
        universe = set(declared)

        literal_refs = find_literal_references(sources, declared)
        declarations: List[AliasDeclaration] = []
        for source in sources:
            declarations.extend(extract_alias_declarations(source, universe.__contains__))
        resolution = self.resolver.resolve(declarations, sources)

        # Only the winning declaration of a key can be used; every declaring
        # file still hides its own literal from direct evidence.
        aliases_by_asset: Dict[str, Set[str]] = {}
        declaring_files: Dict[str, Set[Path]] = {}
        for declaration in declarations:
            asset = declaration.resource_path
            declaring_files.setdefault(asset, set()).add(declaration.defining_file)
            if resolution.definitions.get(declaration.key) == declaration.defining_file:
                aliases_by_asset.setdefault(asset, set()).add(declaration.key)

        used: Set[str] = set()
        references: Dict[str, List[str]] = {}
        for asset in declared:
            keys = aliases_by_asset.get(asset, set())
            used_keys = keys & resolution.used
            defining_files = declaring_files.get(asset, set())
            direct_files = [
                path for path in literal_refs.get(asset, []) if path not in defining_files
            ]
            alias_files: List[Path] = []
            for key in sorted(used_keys):
                alias_files.extend(resolution.usages.get(key, []))

            if used_keys or direct_files:
                used.add(asset)
                references[asset] = _relative_unique(context, [*direct_files, *alias_files])

        self.logger.debug("Assets: %d declared, %d used", len(declared), len(used))
        return UsageReport.partition(declared, used, references)


def _relative_unique(context: AnalysisContext, paths: List[Path]) -> List[str]:
    result: List[str] = []
    for path in paths:
        rel = context.relative(path)
        if rel not in result:
            result.append(rel)
    return result


__all__ = ["AssetAnalyzer"]
