"""Pattern matchers that turn raw Dart source text into reference facts."""

from __future__ import annotations

from .aliases import definition_pattern, extract_alias_declarations
from .literals import (
    dependency_patterns,
    find_dependency_references,
    find_literal_references,
    is_dependency_referenced,
)
from .patterns import find_all
from .structure import directive_uris, extract_file_references, resolve_directive_target

__all__ = [
    "definition_pattern",
    "dependency_patterns",
    "directive_uris",
    "extract_alias_declarations",
    "extract_file_references",
    "find_all",
    "find_dependency_references",
    "find_literal_references",
    "is_dependency_referenced",
    "resolve_directive_target",
]
