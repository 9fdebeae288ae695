"""Recursive source enumeration for Flutter project trees."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .logging import get_logger

DART_EXTENSION = ".dart"

LIB_DIR = "lib"
TEST_DIR = "test"
INTEGRATION_TEST_DIR = "integration_test"

_DART_EXCLUDED_DIRS = ("build", "node_modules")

# Directories skipped when looking for stray Dart files at the project root;
# the conventional source roots are collected separately.
_ROOT_EXCLUDED_DIRS = (
    LIB_DIR,
    TEST_DIR,
    INTEGRATION_TEST_DIR,
    "build",
    "ios",
    "android",
    "web",
    "windows",
    "macos",
    "linux",
    ".dart_tool",
    "node_modules",
    ".git",
)


class SourceCollector:
    """Walks directories to produce sorted absolute file paths."""

    def __init__(self, extra_excluded_dirs: Iterable[str] = ()) -> None:
        self.extra_excluded_dirs = tuple(extra_excluded_dirs)
        self.logger = get_logger("collector")

    def collect(
        self,
        root: Path,
        *,
        extension: str | None = None,
        exclude_dirs: Sequence[str] = (),
    ) -> List[Path]:
        """Return every file under `root`, or an empty list when it does not exist."""
        if not root.is_dir():
            self.logger.debug("Directory not found: %s", root)
            return []
        excluded = set(exclude_dirs) | set(self.extra_excluded_dirs)
        return sorted(self._iter_files(root, extension, excluded))

    def collect_dart(self, root: Path) -> List[Path]:
        """Return Dart sources under `root`, skipping build output."""
        return self.collect(root, extension=DART_EXTENSION, exclude_dirs=_DART_EXCLUDED_DIRS)

    def collect_library(self, project_root: Path) -> List[Path]:
        return self.collect_dart(project_root / LIB_DIR)

    def collect_project_sources(self, project_root: Path) -> List[Path]:
        """Return lib, test, integration_test and stray root-level Dart files."""
        files: List[Path] = []
        files.extend(self.collect_dart(project_root / LIB_DIR))
        files.extend(self.collect_dart(project_root / TEST_DIR))
        files.extend(self.collect_dart(project_root / INTEGRATION_TEST_DIR))
        files.extend(
            self.collect(
                project_root,
                extension=DART_EXTENSION,
                exclude_dirs=_ROOT_EXCLUDED_DIRS,
            )
        )
        return files

    def _iter_files(
        self,
        root: Path,
        extension: str | None,
        excluded: set[str],
    ) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in excluded and not name.startswith(".")
            )
            current_dir = Path(dirpath)
            for filename in filenames:
                if extension and not filename.endswith(extension):
                    continue
                yield current_dir / filename

    def _on_walk_error(self, error: OSError) -> None:
        self.logger.warning("Could not access %s; skipping (%s)", error.filename, error.strerror)


__all__ = [
    "DART_EXTENSION",
    "INTEGRATION_TEST_DIR",
    "LIB_DIR",
    "SourceCollector",
    "TEST_DIR",
]
