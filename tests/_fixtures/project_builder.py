"""Helper utilities for constructing temporary Flutter projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from fluttertidy.context import AnalysisContext
from fluttertidy.manifest import ManifestReader
from fluttertidy.models import AnalysisResult
from fluttertidy.orchestrator import Orchestrator


class ProjectBuilder:
    """Writes files into a throwaway Flutter project and analyzes it."""

    def __init__(self, tmp_path: Path, name: str = "my_app") -> None:
        root = tmp_path / name
        root.mkdir()
        self.root = root.resolve()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def touch(self, *relatives: str) -> None:
        """Create placeholder binary files such as images."""
        for relative in relatives:
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"\x89PNG\r\n")

    def context(self) -> AnalysisContext:
        """Return a fresh analysis context with the manifest already read."""
        manifest = ManifestReader().read(self.root)
        return AnalysisContext(self.root, manifest=manifest)

    def analyze(self, **kwargs: object) -> AnalysisResult:
        return Orchestrator().run(self.root, **kwargs)  # type: ignore[arg-type]

    def path(self, relative: str = "") -> Path:
        return self.root / relative if relative else self.root


__all__ = ["ProjectBuilder"]
