"""Intersection of version ranges.

Given two ranges and a version ordering, :class:`RangeIntersector` computes
the tightest range satisfying both, or reports that none exists.

Bound selection
---------------

For each side the tighter bound wins: the higher of the two lower bounds and
the lower of the two upper bounds, each keeping its own inclusivity. An
unbounded side never wins over a finite one. When both bounds sit on the
same version, that version is only included if both inputs include it.

Emptiness
---------

The result is empty when the chosen lower bound lies above the chosen upper
bound, or when both sit on the same version and either side excludes it.
An empty result is returned as ``None``; it is not an error.

Typical usage::

    intersector = RangeIntersector(VersionComparator("gradle"))
    intersector.intersect(parse_range("[1.0,10.0]"), parse_range("[3.0,5.0)"))
    # VersionRange for [3.0,5.0)

    intersect_ranges("[1.0,2.0)", "[2.0,3.0)")   # None
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Optional

from verrange.utils import get_logger
from verrange.models import Bound, CompareFunc, VersionRange
from verrange.exceptions import ParseError, VersionError
from verrange.core.comparator import get_comparator
from verrange.core.parser import RangeParser, parse_range

logger = get_logger("intersector")


def _spelling(value1: str, value2: str) -> str:
    """Pick one spelling for two versions the ordering considers equal."""
    return min(value1, value2, key=lambda v: (len(v), v))


class RangeIntersector:
    """Computes range intersections under a fixed version ordering.

    Args:
        cmp: Three-way version ordering. Defaults to the gradle scheme.
    """

    def __init__(self, cmp: Optional[CompareFunc] = None) -> None:
        self.cmp: CompareFunc = cmp if cmp is not None else get_comparator()

    def intersect(
        self, first: VersionRange, second: VersionRange
    ) -> Optional[VersionRange]:
        """Return the intersection of two ranges, or ``None`` when empty.

        Neither input is modified.
        """
        lower = self._tighter_lower(first.lower, second.lower)
        upper = self._tighter_upper(first.upper, second.upper)

        if self._is_empty(lower, upper):
            logger.debug("%s and %s do not overlap", first, second)
            return None

        result = VersionRange(lower, upper)
        logger.debug("Intersection of %s and %s is %s", first, second, result)
        return result

    def intersect_all(self, ranges: Iterable[VersionRange]) -> Optional[VersionRange]:
        """Fold :meth:`intersect` over ``ranges``.

        Stops at the first empty intermediate result.

        Raises:
            ValueError: ``ranges`` is empty.
        """
        items = list(ranges)
        if not items:
            raise ValueError("intersect_all() needs at least one range")

        def step(acc: Optional[VersionRange], item: VersionRange):
            return None if acc is None else self.intersect(acc, item)

        return reduce(step, items[1:], items[0])

    def _tighter_lower(self, first: Bound, second: Bound) -> Bound:
        if first.value is None:
            return second
        if second.value is None:
            return first

        result = self.cmp(first.value, second.value)
        if result > 0:
            return first
        if result < 0:
            return second
        return Bound(
            _spelling(first.value, second.value),
            first.inclusive and second.inclusive,
        )

    def _tighter_upper(self, first: Bound, second: Bound) -> Bound:
        if first.value is None:
            return second
        if second.value is None:
            return first

        result = self.cmp(first.value, second.value)
        if result < 0:
            return first
        if result > 0:
            return second
        return Bound(
            _spelling(first.value, second.value),
            first.inclusive and second.inclusive,
        )

    def _is_empty(self, lower: Bound, upper: Bound) -> bool:
        if lower.value is None or upper.value is None:
            return False

        result = self.cmp(lower.value, upper.value)
        if result > 0:
            return True
        if result == 0:
            # A single point survives only when both sides include it
            return not (lower.inclusive and upper.inclusive)
        return False


def intersect_ranges(
    first: str,
    second: str,
    cmp: Optional[CompareFunc] = None,
    *,
    parser: Optional[RangeParser] = None,
) -> Optional[str]:
    """Intersect two range strings and return the serialized result.

    Args:
        first: First range string.
        second: Second range string.
        cmp: Version ordering; defaults to the gradle scheme.
        parser: Parser to use; defaults to :func:`parse_range`.

    Returns:
        The intersection in canonical range syntax, or ``None`` when the
        ranges do not overlap or either one is malformed. A result holding
        exactly one version is written in the short form, so touching
        inclusive ranges give ``"[2.0]"`` rather than ``"[2.0,2.0]"``; both
        strings parse to equal :class:`VersionRange` objects.
    """
    parse = parser.parse if parser is not None else parse_range

    try:
        result = RangeIntersector(cmp).intersect(parse(first), parse(second))
    except (ParseError, VersionError) as exc:
        logger.warning("Cannot intersect %r and %r: %s", first, second, exc)
        return None

    return None if result is None else result.to_string()
