"""Plain-text and JSON rendering of analysis results."""

from __future__ import annotations

import json
from typing import List

from .models import AnalysisResult, UsageReport

_RULE = "=" * 45
_SUBRULE = "-" * 24


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2, sort_keys=True)


def render_text(result: AnalysisResult, *, with_references: bool = False) -> str:
    """Human-readable summary of whichever domains the run analyzed."""
    lines: List[str] = ["Flutter Tidy - Analysis Results", _RULE, ""]
    if not result.manifest_found:
        lines.append("pubspec.yaml not found; declared assets and dependencies are empty.")
        lines.append("")
    elif result.manifest_error:
        lines.append(f"pubspec.yaml could not be parsed: {result.manifest_error}")
        lines.append("")

    summary: List[str] = []
    if result.assets is not None:
        summary.append(f"- Unused assets: {len(result.assets.unused)}")
    if result.dependencies is not None:
        count = len(result.dependencies.generic.unused) + len(result.dependencies.dev.unused)
        summary.append(f"- Unused packages: {count}")
    if result.files is not None:
        summary.append(f"- Unused files: {len(result.files.unused)}")
    if len(summary) > 1:
        lines.append("Summary")
        lines.extend(summary)
        lines.append("")

    if result.assets is not None:
        lines.extend(
            _section(
                "Unused Assets",
                result.assets,
                empty="All assets are being used in your project.",
                hint="Consider removing these assets to reduce app size.",
                with_references=with_references,
            )
        )
    if result.dependencies is not None:
        lines.extend(["Unused Packages", _SUBRULE])
        generic, dev = result.dependencies.generic, result.dependencies.dev
        if not generic.unused and not dev.unused:
            lines.append("All packages are being used in your project.")
        if generic.unused:
            lines.append("Regular dependencies:")
            lines.extend(f"  - {name}" for name in generic.unused)
        if dev.unused:
            lines.append("Dev dependencies:")
            lines.extend(f"  - {name}" for name in dev.unused)
        lines.append("")
        if with_references:
            lines.extend(_references_block(generic))
            lines.extend(_references_block(dev))
    if result.files is not None:
        lines.extend(
            _section(
                "Unused Files",
                result.files,
                empty="All files are being used in your project.",
                hint=None,
                with_references=with_references,
            )
        )

    if len(summary) > 1:
        lines.extend(
            [
                _RULE,
                "Recommended actions",
                "- Unused assets: remove them from pubspec.yaml or start using them.",
                "- Unused packages: move them to dev_dependencies or remove them.",
                "- Unused files: consider removing them to keep the codebase clean.",
                "",
            ]
        )

    if result.warnings:
        lines.append(f"{len(result.warnings)} warning(s) logged during analysis.")
    return "\n".join(lines).rstrip() + "\n"


def _section(
    title: str,
    report: UsageReport,
    *,
    empty: str,
    hint: str | None,
    with_references: bool,
) -> List[str]:
    lines = [title, _SUBRULE]
    lines.append(f"Total: {len(report.declared)}  Used: {len(report.used)}  Unused: {len(report.unused)}")
    if not report.unused:
        lines.append(empty)
    else:
        lines.extend(f"  - {item}" for item in report.unused)
        if hint:
            lines.append(hint)
    lines.append("")
    if with_references:
        lines.extend(_references_block(report))
    return lines


def _references_block(report: UsageReport) -> List[str]:
    if not report.references:
        return []
    lines = ["Referenced by:"]
    for item in report.declared:
        paths = report.references.get(item)
        if not paths:
            continue
        lines.append(f"  {item}")
        lines.extend(f"    <- {path}" for path in paths)
    lines.append("")
    return lines


__all__ = ["render_json", "render_text"]
