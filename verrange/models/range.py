"""
Version range data model for verrange.

A :class:`VersionRange` is a mathematical interval of versions made of two
:class:`Bound` objects. Either side may be unbounded, and each finite side
is independently inclusive or exclusive. Instances are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from verrange.constants import (
    CLOSE_EXC,
    CLOSE_INC,
    LOWER_INFINITE,
    OPEN_EXC,
    OPEN_INC,
    SEPARATOR,
    UPPER_INFINITE,
)

#: Three-way version ordering: negative, zero or positive.
CompareFunc = Callable[[str, str], int]


@dataclass(frozen=True)
class Bound:
    """
    One endpoint of a version range.

    Attributes:
        value: Version string, or ``None`` when this side is unbounded.
        inclusive: Whether ``value`` itself belongs to the range.
    """

    value: Optional[str] = None
    inclusive: bool = False

    def __post_init__(self) -> None:
        if self.value is None and self.inclusive:
            raise ValueError("An infinite bound cannot be inclusive")

    @classmethod
    def infinite(cls) -> "Bound":
        """Return an unbounded side."""
        return cls(None, False)

    @property
    def is_infinite(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        if self.value is None:
            return "unbounded"
        return f"{self.value} ({'inclusive' if self.inclusive else 'exclusive'})"


@dataclass(frozen=True)
class VersionRange:
    """
    An interval of versions.

    Two ranges are equal when their bounds are equal, so ``[2.0]`` and
    ``[2.0,2.0]`` describe the same range.

    Attributes:
        lower: Lower bound.
        upper: Upper bound.
    """

    lower: Bound
    upper: Bound

    @property
    def is_single_value(self) -> bool:
        """Return True if the range contains exactly one version."""
        return (
            self.lower.value is not None
            and self.lower.value == self.upper.value
            and self.lower.inclusive
            and self.upper.inclusive
        )

    @property
    def is_unbounded(self) -> bool:
        """Return True if neither side constrains versions."""
        return self.lower.is_infinite and self.upper.is_infinite

    def contains(self, version: str, cmp: CompareFunc) -> bool:
        """
        Check whether ``version`` falls inside this range.

        Args:
            version: Version string to test.
            cmp: Three-way ordering over version strings.

        Returns:
            True if the version satisfies both bounds.
        """
        if self.lower.value is not None:
            result = cmp(version, self.lower.value)
            if result < 0 or (result == 0 and not self.lower.inclusive):
                return False

        if self.upper.value is not None:
            result = cmp(version, self.upper.value)
            if result > 0 or (result == 0 and not self.upper.inclusive):
                return False

        return True

    def to_string(self) -> str:
        """
        Render the canonical Maven-style range string.

        Returns:
            Range string such as ``[1.0,2.0)``, ``(,5.0]`` or ``[1.2.3]``.
        """
        if self.is_single_value:
            return f"{OPEN_INC}{self.lower.value}{CLOSE_INC}"

        if self.lower.value is None:
            lower = LOWER_INFINITE
        else:
            lower = (OPEN_INC if self.lower.inclusive else OPEN_EXC) + self.lower.value

        if self.upper.value is None:
            upper = UPPER_INFINITE
        else:
            upper = self.upper.value + (CLOSE_INC if self.upper.inclusive else CLOSE_EXC)

        return f"{lower}{SEPARATOR}{upper}"

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "range": self.to_string(),
            "lower": self.lower.value,
            "lower_inclusive": self.lower.inclusive,
            "upper": self.upper.value,
            "upper_inclusive": self.upper.inclusive,
        }

    def __str__(self) -> str:
        return self.to_string()
