"""Usage analyzers and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .assets import AssetAnalyzer
from .base import Analyzer
from .dependencies import DependencyAnalyzer
from .files import FileAnalyzer

_BUILTIN_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "assets": AssetAnalyzer,
    "files": FileAnalyzer,
    "dependencies": DependencyAnalyzer,
}


def discover_analyzers(enabled: Sequence[str] | None = None) -> List[Analyzer]:
    """Return instantiated analyzers, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set.difference(_BUILTIN_FACTORIES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown analyzers requested: {missing}")

    analyzers: List[Analyzer] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        instance = factory()
        if not isinstance(instance, Analyzer):
            raise TypeError(f"Analyzer factory for '{name}' did not return an Analyzer instance")
        analyzers.append(instance)
    return analyzers


__all__ = [
    "Analyzer",
    "AssetAnalyzer",
    "DependencyAnalyzer",
    "FileAnalyzer",
    "discover_analyzers",
]
