"""Two-pass alias resolution: locate each alias's defining file, then its users."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence, Set

from ..extractors.aliases import definition_pattern
from ..logging import get_logger
from ..models import AliasDeclaration, SourceFile


@dataclass
class AliasResolution:
    """Outcome of resolving alias declarations against a corpus."""

    definitions: Dict[str, Path] = field(default_factory=dict)
    used: Set[str] = field(default_factory=set)
    usages: Dict[str, List[Path]] = field(default_factory=dict)
    unresolved: List[str] = field(default_factory=list)
    duplicates: Dict[str, List[Path]] = field(default_factory=dict)


class AliasResolver:
    """Finds aliases referenced from a file other than the one declaring them."""

    def __init__(self) -> None:
        self.logger = get_logger("aliases")

    def resolve(
        self,
        declarations: Sequence[AliasDeclaration],
        sources: Sequence[SourceFile],
    ) -> AliasResolution:
        resolution = AliasResolution()
        ordered_sources = sorted(sources, key=lambda source: source.path.as_posix())
        keys = self._distinct_keys(declarations, resolution)

        # Pass 1 must finish for every key before any usage is counted.
        for key, declaration in keys.items():
            pattern = definition_pattern(declaration.scope_name, declaration.alias_name)
            for source in ordered_sources:
                if pattern.search(source.text):
                    resolution.definitions[key] = source.path
                    break
            else:
                resolution.unresolved.append(key)
                self.logger.debug("No defining file found for alias %s", key)

        # Pass 2
        for source in ordered_sources:
            for key, defining_file in resolution.definitions.items():
                if source.path == defining_file:
                    continue
                if key in source.text:
                    resolution.used.add(key)
                    resolution.usages.setdefault(key, []).append(source.path)

        self.logger.debug(
            "Resolved %d aliases (%d used, %d unresolved)",
            len(resolution.definitions),
            len(resolution.used),
            len(resolution.unresolved),
        )
        return resolution

    def _distinct_keys(
        self,
        declarations: Sequence[AliasDeclaration],
        resolution: AliasResolution,
    ) -> Dict[str, AliasDeclaration]:
        """First declaration per key in sorted path order; record the rest as duplicates."""
        ordered = sorted(
            enumerate(declarations),
            key=lambda item: (item[1].defining_file.as_posix(), item[0]),
        )
        keys: Dict[str, AliasDeclaration] = {}
        for _, declaration in ordered:
            key = declaration.key
            winner = keys.get(key)
            if winner is None:
                keys[key] = declaration
                continue
            if declaration.defining_file == winner.defining_file:
                continue
            files = resolution.duplicates.setdefault(key, [winner.defining_file])
            files.append(declaration.defining_file)
            self.logger.warning(
                "Alias %s is declared in several files; using %s",
                key,
                winner.defining_file,
            )
        return keys


__all__ = ["AliasResolution", "AliasResolver"]
