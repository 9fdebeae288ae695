"""Literal containment matchers for asset paths and package imports."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..models import SourceFile


def find_literal_references(
    sources: Iterable[SourceFile], literals: Sequence[str]
) -> Dict[str, List[Path]]:
    """Map each literal to the files whose text contains it verbatim."""
    references: Dict[str, List[Path]] = {}
    for source in sources:
        if not source.text:
            continue
        for literal in literals:
            if literal and literal in source.text:
                references.setdefault(literal, []).append(source.path)
    return references


def dependency_patterns(name: str) -> List[re.Pattern[str]]:
    """Directive patterns that count as a use of package `name`.

    Besides `package:<name>/...`, names with underscores also match every
    `package:<left>/<right>.dart` split, which is how federated plugin
    families expose sub-entry-points (`a_b_c` -> `package:a_b/c.dart`).
    """
    escaped = re.escape(name)
    patterns = [re.compile(rf"\b(?:import|export)\s+['\"]package:{escaped}/.*?['\"]")]
    parts = name.split("_")
    for index in range(1, len(parts)):
        parent = re.escape("_".join(parts[:index]))
        child = re.escape("_".join(parts[index:]))
        patterns.append(
            re.compile(rf"\b(?:import|export)\s+['\"]package:{parent}/{child}\.dart['\"]")
        )
    return patterns


def is_dependency_referenced(text: str, patterns: Sequence[re.Pattern[str]]) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def find_dependency_references(
    sources: Iterable[SourceFile], names: Sequence[str]
) -> Dict[str, List[Path]]:
    """Map each dependency name to the files that import it."""
    compiled = {name: dependency_patterns(name) for name in names}
    references: Dict[str, List[Path]] = {}
    for source in sources:
        if "package:" not in source.text:
            continue
        for name, patterns in compiled.items():
            if is_dependency_referenced(source.text, patterns):
                references.setdefault(name, []).append(source.path)
    return references


__all__ = [
    "dependency_patterns",
    "find_dependency_references",
    "find_literal_references",
    "is_dependency_referenced",
]
