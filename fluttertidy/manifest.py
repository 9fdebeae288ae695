"""pubspec.yaml reading: declared assets and dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import yaml

from .logging import get_logger
from .source_collector import SourceCollector

MANIFEST_FILENAME = "pubspec.yaml"

# Flutter SDK packages that are always present and never imported the usual way.
SDK_PSEUDO_DEPENDENCIES = (
    "flutter",
    "flutter_test",
    "flutter_lints",
    "flutter_localizations",
)


class ManifestError(RuntimeError):
    """Raised when pubspec.yaml exists but cannot be parsed."""


@dataclass
class ProjectManifest:
    """Declared universes extracted from pubspec.yaml."""

    root: Path
    name: Optional[str] = None
    assets: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    found: bool = True
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


class ManifestReader:
    """Loads pubspec.yaml and expands asset directories into file lists."""

    def __init__(
        self,
        collector: SourceCollector | None = None,
        *,
        ignored_dependencies: Iterable[str] = (),
        ignored_assets: Iterable[str] = (),
    ) -> None:
        self.collector = collector or SourceCollector()
        self.excluded_dependencies = set(SDK_PSEUDO_DEPENDENCIES) | set(ignored_dependencies)
        self.ignored_assets = list(ignored_assets)
        self.logger = get_logger("manifest")

    def read(self, root: Path) -> ProjectManifest:
        """Return the manifest for `root`; never raises for missing or broken files."""
        path = root / MANIFEST_FILENAME
        if not path.is_file():
            manifest = ProjectManifest(root=root, found=False)
            self._warn(manifest, "%s not found at %s", MANIFEST_FILENAME, path)
            return manifest

        try:
            document = load_document(path)
        except ManifestError as exc:
            manifest = ProjectManifest(root=root, error=str(exc))
            self._warn(manifest, "%s", exc)
            return manifest

        manifest = ProjectManifest(root=root)
        name = document.get("name")
        manifest.name = name if isinstance(name, str) else None

        flutter_section = document.get("flutter")
        raw_assets = flutter_section.get("assets") if isinstance(flutter_section, dict) else None
        manifest.assets = self.expand_assets(root, raw_assets, manifest)

        manifest.dependencies = self._dependency_names(document.get("dependencies"))
        manifest.dev_dependencies = self._dependency_names(document.get("dev_dependencies"))
        self.logger.debug(
            "Manifest declares %d assets, %d dependencies, %d dev dependencies",
            len(manifest.assets),
            len(manifest.dependencies),
            len(manifest.dev_dependencies),
        )
        return manifest

    def expand_assets(
        self,
        root: Path,
        entries: Any,
        manifest: ProjectManifest | None = None,
    ) -> List[str]:
        """Turn `flutter.assets` entries into project-relative file paths.

        Directory entries expand to every file beneath them. Paths that show
        up through more than one entry are listed once, at first occurrence.
        """
        if not isinstance(entries, list):
            return []

        assets: List[str] = []
        seen: set[str] = set()
        for entry in entries:
            declared = _asset_entry_path(entry)
            if declared is None:
                continue
            asset_path = root / declared
            if not asset_path.exists():
                self._warn(manifest, "Asset path does not exist: %s", declared)
                continue
            if asset_path.is_dir():
                candidates = [
                    file.relative_to(root).as_posix()
                    for file in self.collector.collect(asset_path)
                ]
            else:
                candidates = [asset_path.relative_to(root).as_posix()]
            for candidate in candidates:
                if candidate in seen or self._is_ignored_asset(candidate):
                    continue
                seen.add(candidate)
                assets.append(candidate)
        return assets

    def _dependency_names(self, section: Any) -> List[str]:
        if not isinstance(section, dict):
            return []
        names: List[str] = []
        for key in section:
            if not isinstance(key, str) or not key.strip():
                continue
            if key in self.excluded_dependencies:
                continue
            names.append(key)
        return names

    def _is_ignored_asset(self, rel_path: str) -> bool:
        return any(fnmatchcase(rel_path, pattern) for pattern in self.ignored_assets)

    def _warn(self, manifest: ProjectManifest | None, message: str, *args: object) -> None:
        self.logger.warning(message, *args)
        if manifest is not None:
            manifest.warnings.append(message % args)


def load_document(path: Path) -> Dict[str, Any]:
    """Parse a pubspec file into a mapping, raising ManifestError on bad input."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read {path.name}: {exc}") from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ManifestError(f"{path.name} must contain a mapping at the root")
    return loaded


def _asset_entry_path(entry: Any) -> Optional[str]:
    # Newer pubspecs allow `- path: assets/x.png` with flavor/transformer keys.
    if isinstance(entry, dict):
        entry = entry.get("path")
    if not isinstance(entry, str) or not entry.strip():
        return None
    return entry.strip()


def declared_dependencies(manifest: ProjectManifest) -> Sequence[str]:
    """Ordinary followed by development dependencies, without duplicates."""
    ordered: List[str] = []
    for name in [*manifest.dependencies, *manifest.dev_dependencies]:
        if name not in ordered:
            ordered.append(name)
    return ordered


__all__ = [
    "MANIFEST_FILENAME",
    "ManifestError",
    "ManifestReader",
    "ProjectManifest",
    "SDK_PSEUDO_DEPENDENCIES",
    "declared_dependencies",
    "load_document",
]
