"""Resolvers that turn extracted facts into usage sets."""

from __future__ import annotations

from .aliases import AliasResolution, AliasResolver
from .reachability import ReachabilityResolver, find_entry_points

__all__ = [
    "AliasResolution",
    "AliasResolver",
    "ReachabilityResolver",
    "find_entry_points",
]
