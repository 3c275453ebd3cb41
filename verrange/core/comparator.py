"""
Version ordering schemes for verrange.

The range core never interprets version strings on its own; it relies on a
three-way comparison function supplied by the caller. This module provides
the two orderings verrange ships with:

- ``gradle`` — the ordering used by Gradle-family build tools. Versions are
  split into parts on ``.``, ``-``, ``_``, ``+`` and between digits and
  letters. Numeric parts compare numerically and rank above text parts;
  ``dev`` ranks below any other text, and ``rc`` < ``snapshot`` < ``final``
  < ``ga`` < ``release`` < ``sp`` rank above any other text.
- ``pep440`` — Python packaging ordering, via :mod:`packaging.version`.

Typical usage::

    cmp = VersionComparator("gradle")
    cmp("1.0-rc1", "1.0")        # -1
    cmp.less_than("2.6.0", "2.7.0")  # True
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from packaging.version import InvalidVersion, Version, parse

from verrange.exceptions import ConfigError, VersionError
from verrange.constants import (
    DEFAULT_VERSION_SCHEME,
    DEV_QUALIFIER,
    SCHEME_GRADLE,
    SCHEME_PEP440,
    SPECIAL_QUALIFIERS,
    VERSION_PART_SEPARATORS,
    VERSION_SCHEMES,
)

# Runs of ASCII digits, or runs of anything that is neither a digit nor a separator
_PART_PATTERN = re.compile(
    r"[0-9]+|[^0-9" + re.escape(VERSION_PART_SEPARATORS) + r"]+"
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# ---------------------------------------------------------------------------
# gradle scheme
# ---------------------------------------------------------------------------


def split_version(version: str) -> List[str]:
    """Split a version string into its comparable parts.

    Examples:
        >>> split_version("1.2.0-SNAPSHOT")
        ['1', '2', '0', 'SNAPSHOT']
        >>> split_version("2.7rc1")
        ['2', '7', 'rc', '1']
    """
    return _PART_PATTERN.findall(version)


def _qualifier_rank(part: str) -> Optional[int]:
    """Return the special ordering rank of a text part, if it has one."""
    lowered = part.lower()
    if lowered == DEV_QUALIFIER:
        return -1
    return SPECIAL_QUALIFIERS.get(lowered)


def _is_numeric(part: str) -> bool:
    return part.isascii() and part.isdigit()


def _compare_numeric(part1: str, part2: str) -> int:
    """Compare two digit runs by value without converting them to int."""
    digits1 = part1.lstrip("0")
    digits2 = part2.lstrip("0")
    if len(digits1) != len(digits2):
        return _sign(len(digits1) - len(digits2))
    return (digits1 > digits2) - (digits1 < digits2)


def _compare_parts(part1: str, part2: str) -> int:
    numeric1 = _is_numeric(part1)
    numeric2 = _is_numeric(part2)

    if numeric1 and numeric2:
        return _compare_numeric(part1, part2)
    if numeric1:
        return 1
    if numeric2:
        return -1

    rank1 = _qualifier_rank(part1)
    rank2 = _qualifier_rank(part2)
    if rank1 is not None or rank2 is not None:
        return _sign((rank1 or 0) - (rank2 or 0))

    return (part1 > part2) - (part1 < part2)


def compare_gradle(version1: str, version2: str) -> int:
    """Compare two versions using Gradle-style ordering.

    When one version has more parts than the other, an extra numeric part
    makes it higher (``1.2.1 > 1.2``) while an extra text part makes it
    lower (``1.2-rc1 < 1.2``).

    Returns:
        ``-1``, ``0`` or ``1``.
    """
    if version1 == version2:
        return 0

    parts1 = split_version(version1)
    parts2 = split_version(version2)

    for part1, part2 in zip(parts1, parts2):
        result = _compare_parts(part1, part2)
        if result:
            return result

    common = min(len(parts1), len(parts2))
    if len(parts1) > common:
        return 1 if _is_numeric(parts1[common]) else -1
    if len(parts2) > common:
        return -1 if _is_numeric(parts2[common]) else 1
    return 0


# ---------------------------------------------------------------------------
# pep440 scheme
# ---------------------------------------------------------------------------


def _parse_pep440(value: str) -> Version:
    """Parse a version string into a PEP 440 Version object."""
    try:
        parsed = parse(value)
    # ValueError also covers release numbers past the int conversion limit
    except (InvalidVersion, ValueError) as exc:
        raise VersionError(
            f"Not a valid PEP 440 version: {value!r}",
            version=value,
            scheme=SCHEME_PEP440,
        ) from exc
    return parsed


def compare_pep440(version1: str, version2: str) -> int:
    """Compare two versions using PEP 440 ordering.

    Raises:
        VersionError: Either version is not PEP 440 compliant.
    """
    left = _parse_pep440(version1)
    right = _parse_pep440(version2)
    return (left > right) - (left < right)


_SCHEMES: Dict[str, Callable[[str, str], int]] = {
    SCHEME_GRADLE: compare_gradle,
    SCHEME_PEP440: compare_pep440,
}


class VersionComparator:
    """Three-way version ordering bound to a named scheme.

    Instances are callable, so they can be passed anywhere a
    ``cmp(a, b) -> int`` function is expected.

    Args:
        scheme: One of ``"gradle"`` or ``"pep440"``.

    Raises:
        ConfigError: Unknown scheme name.
    """

    __slots__ = ("scheme", "_compare")

    def __init__(self, scheme: str = DEFAULT_VERSION_SCHEME) -> None:
        if scheme not in _SCHEMES:
            raise ConfigError(
                f"Unknown version scheme {scheme!r}; "
                f"expected one of: {', '.join(VERSION_SCHEMES)}",
                option="version_scheme",
            )
        self.scheme = scheme
        self._compare = _SCHEMES[scheme]

    def compare(self, version1: str, version2: str) -> int:
        """Return a negative, zero or positive number."""
        return self._compare(version1, version2)

    def less_than(self, version1: str, version2: str) -> bool:
        """Tell whether ``version1 < version2``."""
        return self._compare(version1, version2) < 0

    def __call__(self, version1: str, version2: str) -> int:
        return self._compare(version1, version2)

    def __repr__(self) -> str:
        return f"VersionComparator(scheme={self.scheme!r})"


def get_comparator(scheme: Optional[str] = None) -> VersionComparator:
    """Return a comparator for ``scheme``, defaulting to the gradle ordering."""
    return VersionComparator(scheme or DEFAULT_VERSION_SCHEME)
