"""Version range parser for interval notation.

Parses the range syntax accepted by Maven and Gradle-family build tools.
Four forms are recognised, tried in this order against the whole string:

- Finite: ``[1.0,2.0)``, ``(1.0,2.0]``
- Lower-infinite: ``(,2.0]``, ``(,2.0)``
- Upper-infinite: ``[1.0,)``, ``(1.0,)``
- Single value: ``[1.2.3]``

``[`` and ``]`` mark an inclusive side, ``(`` and ``)`` an exclusive one.
Whitespace inside the brackets and around the comma is ignored. When Ivy
brackets are enabled, ``]`` also opens and ``[`` also closes an exclusive
side, so ``]1.0,2.0[`` equals ``(1.0,2.0)``.

Typical usage::

    from verrange.core.parser import RangeParser, parse_range

    rng = parse_range("[1.0,2.0)")
    rng.lower.value, rng.lower.inclusive   # ('1.0', True)
    str(rng)                               # '[1.0,2.0)'

    strict = RangeParser(cmp=VersionComparator(), ivy_brackets=False)
    strict.parse("[2.0,1.0]")              # raises ParseError
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Tuple

from verrange.utils import get_logger
from verrange.exceptions import ParseError
from verrange.models import Bound, CompareFunc, VersionRange
from verrange.constants import (
    CLOSE_EXC,
    CLOSE_EXC_IVY,
    CLOSE_INC,
    LOWER_INFINITE,
    OPEN_EXC,
    OPEN_EXC_IVY,
    OPEN_INC,
    SEPARATOR,
    UPPER_INFINITE,
)

# A version token: anything but whitespace, the separator and brackets
_TOKEN = r"([^\s" + re.escape(SEPARATOR + "[]()") + r"]+)"
_SEP = r"\s*" + re.escape(SEPARATOR) + r"\s*"


def _char_class(chars: str) -> str:
    return "[" + re.escape(chars) + "]"


def _build_patterns(
    ivy_brackets: bool,
) -> Tuple[Pattern[str], Pattern[str], Pattern[str], Pattern[str]]:
    """Compile the four range forms for the given bracket alphabet."""
    open_chars = OPEN_INC + OPEN_EXC + (OPEN_EXC_IVY if ivy_brackets else "")
    close_chars = CLOSE_INC + CLOSE_EXC + (CLOSE_EXC_IVY if ivy_brackets else "")
    open_ = "(" + _char_class(open_chars) + ")"
    close = "(" + _char_class(close_chars) + ")"

    finite = open_ + r"\s*" + _TOKEN + _SEP + _TOKEN + r"\s*" + close
    lower_infinite = re.escape(LOWER_INFINITE) + _SEP + _TOKEN + r"\s*" + close
    upper_infinite = open_ + r"\s*" + _TOKEN + _SEP + re.escape(UPPER_INFINITE)
    single = re.escape(OPEN_INC) + r"\s*" + _TOKEN + r"\s*" + re.escape(CLOSE_INC)

    return (
        re.compile(finite),
        re.compile(lower_infinite),
        re.compile(upper_infinite),
        re.compile(single),
    )


class RangeParser:
    """Parser turning range strings into :class:`VersionRange` objects.

    The parser holds no per-call state and may be shared between threads.

    Args:
        ivy_brackets: Also accept Ivy-style exclusive brackets on input.
        cmp: Optional version ordering. When given, finite ranges whose
            lower bound lies above the upper bound are rejected.
    """

    def __init__(
        self,
        *,
        ivy_brackets: bool = True,
        cmp: Optional[CompareFunc] = None,
    ) -> None:
        self.logger = get_logger("parser")
        self.ivy_brackets = ivy_brackets
        self._cmp = cmp
        (
            self._finite,
            self._lower_infinite,
            self._upper_infinite,
            self._single,
        ) = _build_patterns(ivy_brackets)

    def parse(self, text: str) -> VersionRange:
        """Parse ``text`` into a :class:`VersionRange`.

        Raises:
            ParseError: ``text`` matches none of the range forms, or its
                bounds are out of order under the configured ordering.
        """
        if not isinstance(text, str):
            raise ParseError(
                f"Version range must be a string, got {type(text).__name__}"
            )

        candidate = text.strip()

        match = self._finite.fullmatch(candidate)
        if match:
            open_, lower, upper, close = match.groups()
            result = VersionRange(
                Bound(lower, open_ == OPEN_INC),
                Bound(upper, close == CLOSE_INC),
            )
            self._check_order(result, text)
            return self._parsed(text, result)

        match = self._lower_infinite.fullmatch(candidate)
        if match:
            upper, close = match.groups()
            result = VersionRange(Bound.infinite(), Bound(upper, close == CLOSE_INC))
            return self._parsed(text, result)

        match = self._upper_infinite.fullmatch(candidate)
        if match:
            open_, lower = match.groups()
            result = VersionRange(Bound(lower, open_ == OPEN_INC), Bound.infinite())
            return self._parsed(text, result)

        match = self._single.fullmatch(candidate)
        if match:
            value = match.group(1)
            return self._parsed(text, VersionRange(Bound(value, True), Bound(value, True)))

        raise ParseError("Not a valid version range", range_text=text)

    def is_range(self, text: str) -> bool:
        """Return True if ``text`` is syntactically a version range."""
        if not isinstance(text, str):
            return False
        candidate = text.strip()
        return any(
            pattern.fullmatch(candidate)
            for pattern in (
                self._finite,
                self._lower_infinite,
                self._upper_infinite,
                self._single,
            )
        )

    def _check_order(self, result: VersionRange, text: str) -> None:
        if self._cmp is None:
            return
        if self._cmp(result.lower.value, result.upper.value) > 0:
            raise ParseError(
                "Lower bound is above upper bound",
                range_text=text,
                position="lower",
            )

    def _parsed(self, text: str, result: VersionRange) -> VersionRange:
        self.logger.debug("Parsed %r as %s", text, result)
        return result


_default_parser: Optional[RangeParser] = None


def parse_range(text: str) -> VersionRange:
    """Parse ``text`` with the default parser (Ivy brackets accepted).

    Raises:
        ParseError: ``text`` is not a valid version range.
    """
    global _default_parser

    if _default_parser is None:
        _default_parser = RangeParser()
    return _default_parser.parse(text)
