"""
Data model exports for verrange.

Example:
    >>> from verrange.models import Bound, VersionRange
"""

from __future__ import annotations

from verrange.models.range import Bound, CompareFunc, VersionRange

__all__ = [
    "Bound",
    "CompareFunc",
    "VersionRange",
]
