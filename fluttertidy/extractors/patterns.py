"""Stateless regex helpers shared by the extractors."""

from __future__ import annotations

import re
from typing import List


def find_all(pattern: re.Pattern[str], text: str) -> List[re.Match[str]]:
    """Return every non-overlapping match of `pattern` in `text`.

    Each call scans `text` from its start, so nested scans over different
    subjects never share cursor state.
    """
    return list(pattern.finditer(text))


__all__ = ["find_all"]
