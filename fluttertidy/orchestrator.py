"""Pipeline orchestration for a full, stateless analysis run."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .analyzers import Analyzer, discover_analyzers
from .config import ConfigError, TidyConfig, load_config
from .context import AnalysisContext
from .logging import get_logger
from .manifest import ManifestReader
from .models import AnalysisResult
from .source_collector import SourceCollector


class Orchestrator:
    """Coordinates manifest loading, collection and the usage analyzers."""

    def __init__(self, analyzers: Optional[Iterable[Analyzer]] = None) -> None:
        self._analyzer_overrides = list(analyzers) if analyzers is not None else None
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        *,
        analyses: Sequence[str] | None = None,
        reachability: str | None = None,
    ) -> AnalysisResult:
        """Analyze the project at `path`; every call re-scans from scratch."""
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")

        self.logger.info("Starting analysis of %s", root)
        config, config_warning = self._load_config(root)
        if reachability is not None:
            config.reachability = reachability

        collector = SourceCollector(config.exclude_dirs)
        reader = ManifestReader(
            collector,
            ignored_dependencies=config.ignored_dependencies,
            ignored_assets=config.ignored_assets,
        )
        manifest = reader.read(root)
        context = AnalysisContext(root, manifest=manifest, config=config, collector=collector)
        if config_warning:
            context.warnings.insert(0, config_warning)

        result = AnalysisResult(
            root=str(root),
            manifest_found=manifest.found,
            manifest_error=manifest.error,
        )
        for analyzer in self._select_analyzers(config, analyses):
            self.logger.debug("Running analyzer %s", analyzer.__class__.__name__)
            setattr(result, analyzer.result_field, analyzer.analyze(context))

        result.warnings = list(context.warnings)
        self.logger.info("Analysis of %s finished with %d warnings", root, len(result.warnings))
        return result

    def _load_config(self, root: Path) -> Tuple[TidyConfig, Optional[str]]:
        try:
            return load_config(root), None
        except ConfigError as exc:
            message = f"Ignoring invalid configuration: {exc}"
            self.logger.warning("%s", message)
            return TidyConfig(root=root), message

    def _select_analyzers(
        self, config: TidyConfig, analyses: Sequence[str] | None
    ) -> List[Analyzer]:
        if self._analyzer_overrides is not None:
            return list(self._analyzer_overrides)
        enabled = analyses if analyses is not None else (config.analyzers.enabled or None)
        return discover_analyzers(enabled)


__all__ = ["Orchestrator"]
