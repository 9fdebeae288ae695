"""Per-run analysis state: project layout, manifest and the read-once file cache."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import TidyConfig
from .logging import get_logger
from .manifest import ProjectManifest
from .models import SourceFile
from .source_collector import LIB_DIR, SourceCollector


class AnalysisContext:
    """Short-lived state shared by every component of a single analysis run.

    File contents are read at most once and kept for the lifetime of the
    context. A context must not be reused across runs.
    """

    def __init__(
        self,
        root: Path,
        *,
        manifest: Optional[ProjectManifest] = None,
        config: Optional[TidyConfig] = None,
        collector: Optional[SourceCollector] = None,
    ) -> None:
        self.root = root
        self.config = config or TidyConfig(root=root)
        self.manifest = manifest or ProjectManifest(root=root, found=False)
        self.collector = collector or SourceCollector(self.config.exclude_dirs)
        self.package_name = self.config.package_name or root.name.replace("-", "_")
        self.warnings: List[str] = list(self.manifest.warnings)
        self.logger = get_logger("context")
        self._sources: Dict[Path, SourceFile] = {}
        self._library_files: Optional[List[Path]] = None
        self._project_files: Optional[List[Path]] = None

    @property
    def lib_dir(self) -> Path:
        return self.root / LIB_DIR

    def library_files(self) -> List[Path]:
        """Dart files under `lib/`, collected once per run."""
        if self._library_files is None:
            self._library_files = self.collector.collect_library(self.root)
        return list(self._library_files)

    def project_files(self) -> List[Path]:
        """Dart files under lib, test, integration_test and the project root."""
        if self._project_files is None:
            self._project_files = self.collector.collect_project_sources(self.root)
        return list(self._project_files)

    def read(self, path: Path) -> SourceFile:
        cached = self._sources.get(path)
        if cached is not None:
            return cached
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.warn("Could not read %s; treating it as empty (%s)", self.relative(path), exc)
            text = ""
        source = SourceFile(path=path, text=text)
        self._sources[path] = source
        return source

    def read_all(self, paths: Iterable[Path]) -> List[SourceFile]:
        return [self.read(path) for path in paths]

    def relative(self, path: Path) -> str:
        """Project-relative POSIX form of `path`, or the path itself when outside."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def warn(self, message: str, *args: object) -> None:
        """Log a warning and keep it for the run result."""
        self.logger.warning(message, *args)
        self.warnings.append(message % args if args else message)


__all__ = ["AnalysisContext"]
