"""Configuration loading for fluttertidy (.fluttertidy.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".fluttertidy.yml"
REACHABILITY_MODES = ("direct", "transitive")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AnalyzerConfig:
    """Analyzer enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class TidyConfig:
    """Represents the settings defined in .fluttertidy.yml."""

    root: Path
    package_name: Optional[str] = None
    reachability: str = "direct"
    exclude_dirs: List[str] = field(default_factory=list)
    ignored_dependencies: List[str] = field(default_factory=list)
    ignored_assets: List[str] = field(default_factory=list)
    analyzers: AnalyzerConfig = field(default_factory=AnalyzerConfig)


def load_config(config_path: Path) -> TidyConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TidyConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    reachability = _as_str(data.get("reachability")) or "direct"
    reachability = reachability.strip().lower()
    if reachability not in REACHABILITY_MODES:
        raise ConfigError(
            f"Unknown reachability mode '{reachability}' "
            f"(expected one of: {', '.join(REACHABILITY_MODES)})"
        )

    analyzer_data = _as_dict(data.get("analyzers"))
    analyzers = AnalyzerConfig()
    if analyzer_data:
        analyzers.enabled = _as_str_list(analyzer_data.get("enabled"))

    return TidyConfig(
        root=root,
        package_name=_as_str(data.get("package_name")),
        reachability=reachability,
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
        ignored_dependencies=_as_str_list(data.get("ignored_dependencies")),
        ignored_assets=_as_str_list(data.get("ignored_assets")),
        analyzers=analyzers,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnalyzerConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "REACHABILITY_MODES",
    "TidyConfig",
    "load_config",
]
