"""File usage closure over import/export/part/part-of/library references."""

from __future__ import annotations

import re
from collections import deque
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Set

from ..config import REACHABILITY_MODES
from ..logging import get_logger
from ..models import FileReference, ReferenceKind

_ENTRY_POINT_PATTERN = re.compile(r"^main(?:_.+)?\.dart$")


def find_entry_points(lib_dir: Path, files: Iterable[Path]) -> List[Path]:
    """`main.dart` and `main_<flavor>.dart` located directly under `lib_dir`."""
    return [
        path
        for path in files
        if path.parent == lib_dir and _ENTRY_POINT_PATTERN.match(path.name)
    ]


class ReachabilityResolver:
    """Computes which files count as in use.

    In ``direct`` mode a file is in use when it is an entry point, the target
    of any reference, or the source of a ``part of`` directive, whether or not
    the referring file is itself in use. ``transitive`` mode instead walks
    references forward from the entry points and from files that declare
    ``library``, treating a library and its parts as one unit.
    """

    def __init__(self, mode: str = "direct") -> None:
        if mode not in REACHABILITY_MODES:
            raise ValueError(f"Unknown reachability mode: {mode}")
        self.mode = mode
        self.logger = get_logger("reachability")

    def resolve(
        self,
        references: Sequence[FileReference],
        universe: Sequence[Path],
        entry_points: Sequence[Path],
    ) -> Set[Path]:
        if self.mode == "transitive":
            closure = self._walk(references, entry_points)
        else:
            closure = self._direct(references, entry_points)
        known = set(universe)
        filtered = {path for path in closure if path in known}
        self.logger.debug(
            "%s reachability: %d of %d files in use",
            self.mode,
            len(filtered),
            len(known),
        )
        return filtered

    @staticmethod
    def _direct(references: Sequence[FileReference], entry_points: Sequence[Path]) -> Set[Path]:
        closure: Set[Path] = set(entry_points)
        for reference in references:
            closure.add(reference.target)
            if reference.kind is ReferenceKind.PART_OF:
                closure.add(reference.source)
        return closure

    @staticmethod
    def _walk(references: Sequence[FileReference], entry_points: Sequence[Path]) -> Set[Path]:
        edges: Dict[Path, Set[Path]] = {}
        roots: List[Path] = list(entry_points)
        for reference in references:
            if reference.kind is ReferenceKind.LIBRARY:
                roots.append(reference.source)
                continue
            edges.setdefault(reference.source, set()).add(reference.target)
            if reference.kind in (ReferenceKind.PART, ReferenceKind.PART_OF):
                edges.setdefault(reference.target, set()).add(reference.source)

        closure: Set[Path] = set()
        queue = deque(roots)
        while queue:
            current = queue.popleft()
            if current in closure:
                continue
            closure.add(current)
            queue.extend(edges.get(current, ()))
        return closure


__all__ = ["ReachabilityResolver", "find_entry_points"]
