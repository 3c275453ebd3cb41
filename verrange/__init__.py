"""
verrange — version range parsing and intersection

verrange works with version ranges written in mathematical-interval
notation, as accepted by Maven and Gradle-family build tools:

    • Parse ``[1.0,2.0)``, ``(,5.0]``, ``[2.0,)`` and ``[1.2.3]``
    • Intersect ranges under a pluggable version ordering
    • Gradle-style and PEP 440 version orderings out of the box

Example:
    >>> from verrange import intersect_ranges
    >>> intersect_ranges("(,5.0)", "[2.0,)")
    '[2.0,5.0)'
"""

from __future__ import annotations

from verrange.__version__ import __version__
from verrange.exceptions import ParseError, VerRangeError, VersionError
from verrange.models import Bound, VersionRange
from verrange.core import (
    RangeIntersector,
    RangeParser,
    VersionComparator,
    get_comparator,
    intersect_ranges,
    parse_range,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Parse and intersect Maven/Gradle style version ranges."

__all__ = [
    "__version__",
    "Bound",
    "VersionRange",
    "RangeParser",
    "RangeIntersector",
    "VersionComparator",
    "get_comparator",
    "parse_range",
    "intersect_ranges",
    "ParseError",
    "VersionError",
    "VerRangeError",
]
