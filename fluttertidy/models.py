"""Core data models shared across fluttertidy components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set

ResourcePath = str


class ReferenceKind(str, Enum):
    """Structural directive that links one Dart file to another."""

    IMPORT = "import"
    EXPORT = "export"
    PART = "part"
    PART_OF = "part of"
    LIBRARY = "library"


@dataclass(frozen=True)
class SourceFile:
    """A source file and the text read for it during one analysis run."""

    path: Path
    text: str


@dataclass(frozen=True)
class AliasDeclaration:
    """A `static const` inside a class that binds a name to a resource path."""

    scope_name: str
    alias_name: str
    resource_path: ResourcePath
    defining_file: Path

    @property
    def key(self) -> str:
        return f"{self.scope_name}.{self.alias_name}"


@dataclass(frozen=True)
class FileReference:
    """Directed edge between two files; `LIBRARY` edges point at their source."""

    kind: ReferenceKind
    source: Path
    target: Path


@dataclass
class UsageReport:
    """Used/unused partition of one declared resource universe."""

    declared: List[ResourcePath] = field(default_factory=list)
    used: Set[ResourcePath] = field(default_factory=set)
    unused: List[ResourcePath] = field(default_factory=list)
    references: Dict[ResourcePath, List[str]] = field(default_factory=dict)

    @classmethod
    def partition(
        cls,
        declared: Iterable[ResourcePath],
        used: Iterable[ResourcePath],
        references: Optional[Mapping[ResourcePath, Sequence[str]]] = None,
    ) -> "UsageReport":
        """Split `declared` into used and unused, keeping declaration order."""
        ordered = _dedupe(declared)
        universe = set(ordered)
        used_set = {item for item in used if item in universe}
        unused = [item for item in ordered if item not in used_set]
        refs: Dict[ResourcePath, List[str]] = {}
        for item, paths in (references or {}).items():
            if item in universe and paths:
                refs[item] = list(paths)
        return cls(declared=ordered, used=used_set, unused=unused, references=refs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "declared": list(self.declared),
            "used": [item for item in self.declared if item in self.used],
            "unused": list(self.unused),
            "references": {key: list(value) for key, value in self.references.items()},
        }


@dataclass
class FileUsageReport(UsageReport):
    """File partition plus the reference closure it was derived from."""

    closure: Set[ResourcePath] = field(default_factory=set)
    entry_points: List[ResourcePath] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["closure"] = sorted(self.closure)
        data["entry_points"] = list(self.entry_points)
        return data


@dataclass
class DependencyUsageReport:
    """Ordinary and development dependencies, classified separately."""

    generic: UsageReport = field(default_factory=UsageReport)
    dev: UsageReport = field(default_factory=UsageReport)

    def to_dict(self) -> Dict[str, Any]:
        return {"generic": self.generic.to_dict(), "dev": self.dev.to_dict()}


@dataclass
class AnalysisResult:
    """Outcome of one analysis run over a project directory."""

    root: str
    manifest_found: bool = True
    manifest_error: Optional[str] = None
    assets: Optional[UsageReport] = None
    files: Optional[FileUsageReport] = None
    dependencies: Optional[DependencyUsageReport] = None
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "manifest_found": self.manifest_found,
            "manifest_error": self.manifest_error,
            "assets": self.assets.to_dict() if self.assets else None,
            "files": self.files.to_dict() if self.files else None,
            "dependencies": self.dependencies.to_dict() if self.dependencies else None,
            "warnings": list(self.warnings),
        }


def _dedupe(items: Iterable[ResourcePath]) -> List[ResourcePath]:
    seen: Set[ResourcePath] = set()
    ordered: List[ResourcePath] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        ordered.append(item)
    return ordered
