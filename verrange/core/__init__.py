"""
Core functionality exports for verrange.

    from verrange.core import RangeParser, RangeIntersector
"""

from __future__ import annotations

from verrange.core.comparator import VersionComparator, get_comparator
from verrange.core.parser import RangeParser, parse_range
from verrange.core.intersector import RangeIntersector, intersect_ranges

__all__ = [
    "RangeParser",
    "RangeIntersector",
    "VersionComparator",
    "get_comparator",
    "parse_range",
    "intersect_ranges",
]
