"""Structural directives: import, export, part, part of and library."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Optional, Tuple

from ..models import FileReference, ReferenceKind, SourceFile
from .patterns import find_all

_URI = r"['\"]([^'\"]+)['\"]"

# Import and export keep their trailing clauses (`as`, `show`, `hide`,
# `deferred as`, conditional `if`) in group 2, up to the terminating semicolon.
_DIRECTIVE_PATTERNS: Tuple[Tuple[ReferenceKind, re.Pattern[str]], ...] = (
    (ReferenceKind.IMPORT, re.compile(rf"\bimport\s+{_URI}([^;]*);")),
    (ReferenceKind.EXPORT, re.compile(rf"\bexport\s+{_URI}([^;]*);")),
    (ReferenceKind.PART, re.compile(rf"\bpart\s+{_URI}\s*;")),
    (ReferenceKind.PART_OF, re.compile(rf"\bpart\s+of\s+{_URI}\s*;")),
)
# `if (dart.library.io) 'io_impl.dart'`; the condition may itself hold quotes.
_CONDITIONAL_URI_PATTERN = re.compile(rf"\bif\s*\([^)]*\)\s*{_URI}")
_LIBRARY_PATTERN = re.compile(r"^\s*library\b[^;]*;", re.MULTILINE)

_BUILTIN_SCHEME = "dart:"
_PACKAGE_SCHEME = "package:"


def extract_file_references(
    source: SourceFile, project_root: Path, package_name: str
) -> List[FileReference]:
    """Return the directives in `source` whose targets exist on disk.

    A conditional import or export yields one reference per alternative URI.
    """
    references: List[FileReference] = []
    for kind, pattern in _DIRECTIVE_PATTERNS:
        for match in find_all(pattern, source.text):
            for uri in directive_uris(match):
                target = resolve_directive_target(uri, source.path, project_root, package_name)
                if target is None or not target.exists():
                    continue
                references.append(FileReference(kind=kind, source=source.path, target=target))

    if _LIBRARY_PATTERN.search(source.text):
        references.append(
            FileReference(kind=ReferenceKind.LIBRARY, source=source.path, target=source.path)
        )
    return references


def directive_uris(match: re.Match[str]) -> List[str]:
    """Primary URI of a directive match followed by any conditional alternatives."""
    uris = [match.group(1)]
    if match.re.groups >= 2:
        uris.extend(m.group(1) for m in find_all(_CONDITIONAL_URI_PATTERN, match.group(2)))
    return uris


def resolve_directive_target(
    uri: str, source_path: Path, project_root: Path, package_name: str
) -> Optional[Path]:
    """Map a directive URI to a candidate path, or None when it leaves the project.

    `dart:` URIs and other packages' `package:` URIs are dropped. The
    project's own `package:<name>/x` resolves to `<root>/lib/x`; anything
    else is relative to the referencing file's directory.
    """
    uri = uri.strip()
    if not uri or uri.startswith(_BUILTIN_SCHEME):
        return None
    if uri.startswith(_PACKAGE_SCHEME):
        remainder = uri[len(_PACKAGE_SCHEME):]
        name, sep, inner = remainder.partition("/")
        if not sep or name != package_name:
            return None
        return Path(os.path.normpath(project_root / "lib" / inner))
    return Path(os.path.normpath(source_path.parent / uri))


__all__ = ["directive_uris", "extract_file_references", "resolve_directive_target"]
