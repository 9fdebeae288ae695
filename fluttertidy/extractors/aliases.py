"""Scoped alias declarations: `static const` fields that hold resource paths.

Example::

    class AssetPaths {
      static const logo = 'assets/images/logo.png';
      static const String icon = 'assets/icons/app_icon.png';
    }

yields `AssetPaths.logo` and `AssetPaths.icon`.
"""

from __future__ import annotations

import re
from typing import Callable, List

from ..models import AliasDeclaration, SourceFile
from .patterns import find_all

# The body stops at the first closing brace; constant holders rarely nest.
CLASS_PATTERN = re.compile(r"\bclass\s+(\w+)[^{;]*\{([\s\S]*?)\}")
CONST_PATTERN = re.compile(r"\bstatic\s+const(?:\s+\w+)?\s+(\w+)\s*=\s*['\"](.+?)['\"]")


def extract_alias_declarations(
    source: SourceFile, accepts: Callable[[str], bool]
) -> List[AliasDeclaration]:
    """Return aliases in `source` whose bound literal satisfies `accepts`."""
    declarations: List[AliasDeclaration] = []
    for class_match in find_all(CLASS_PATTERN, source.text):
        scope_name, body = class_match.group(1), class_match.group(2)
        for const_match in find_all(CONST_PATTERN, body):
            alias_name, literal = const_match.group(1), const_match.group(2)
            if not accepts(literal):
                continue
            declarations.append(
                AliasDeclaration(
                    scope_name=scope_name,
                    alias_name=alias_name,
                    resource_path=literal,
                    defining_file=source.path,
                )
            )
    return declarations


def definition_pattern(scope_name: str, alias_name: str) -> re.Pattern[str]:
    """Pattern matching a file that declares `alias_name` inside class `scope_name`."""
    return re.compile(
        rf"\bclass\s+{re.escape(scope_name)}\b[\s\S]*?"
        rf"\bstatic\s+const(?:\s+\w+)?\s+{re.escape(alias_name)}\s*="
    )


__all__ = [
    "CLASS_PATTERN",
    "CONST_PATTERN",
    "definition_pattern",
    "extract_alias_declarations",
]
