"""Unit tests for verrange.core.intersector.

Test Coverage:
- Bound selection for finite and unbounded sides
- Inclusivity on equal bounds (logical AND)
- Empty results: disjoint, touching exclusive, degenerate points
- Set properties: commutativity and idempotence
- intersect_all folding
- intersect_ranges string API, including malformed input
"""

from __future__ import annotations

import logging
from itertools import product
from typing import Optional

import pytest

from verrange.core.comparator import VersionComparator, compare_gradle
from verrange.core.intersector import RangeIntersector, intersect_ranges
from verrange.core.parser import RangeParser, parse_range
from verrange.models import Bound, VersionRange


def _intersect(first: str, second: str) -> Optional[VersionRange]:
    return RangeIntersector(compare_gradle).intersect(
        parse_range(first), parse_range(second)
    )


@pytest.mark.unit
class TestDocumentedCases:
    """Tests for the behaviour every caller relies on."""

    def test_disjoint_ranges_are_empty(self) -> None:
        assert _intersect("[1.0,2.0)", "[3.0,4.0)") is None

    def test_touching_exclusive_ranges_are_empty(self) -> None:
        """Test 2.0 is excluded by the first range, so nothing overlaps."""
        assert _intersect("[1.0,2.0)", "[2.0,3.0)") is None

    def test_touching_inclusive_ranges_share_point(self) -> None:
        result = _intersect("[1.0,2.0]", "[2.0,3.0]")

        assert result == parse_range("[2.0,2.0]")
        assert result.is_single_value

    def test_containment(self) -> None:
        assert _intersect("[1.0,10.0]", "[3.0,5.0)") == parse_range("[3.0,5.0)")

    def test_infinite_bounds_absorbed(self) -> None:
        assert _intersect("(,5.0)", "[2.0,)") == parse_range("[2.0,5.0)")

    def test_single_value_with_itself(self) -> None:
        assert _intersect("[1.2.3]", "[1.2.3]") == parse_range("[1.2.3]")

    def test_different_single_values_are_empty(self) -> None:
        assert _intersect("[1.2.3]", "[1.2.4]") is None


@pytest.mark.unit
class TestLowerBoundSelection:
    """Tests for choosing the result's lower bound."""

    def test_both_infinite(self) -> None:
        result = _intersect("(,1.0]", "(,2.0]")

        assert result.lower.is_infinite

    def test_one_infinite_keeps_finite_inclusivity(self) -> None:
        result = _intersect("(,3.0]", "(1.0,)")

        assert result.lower == Bound("1.0", False)

    def test_higher_value_wins_with_own_inclusivity(self) -> None:
        result = _intersect("(1.0,5.0]", "[2.0,5.0]")

        assert result.lower == Bound("2.0", True)

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ("[1.0,5.0]", "[1.0,5.0]", True),
            ("[1.0,5.0]", "(1.0,5.0]", False),
            ("(1.0,5.0]", "[1.0,5.0]", False),
            ("(1.0,5.0]", "(1.0,5.0]", False),
        ],
        ids=["inc-inc", "inc-exc", "exc-inc", "exc-exc"],
    )
    def test_equal_values_and_inclusivity(
        self, first: str, second: str, expected: bool
    ) -> None:
        result = _intersect(first, second)

        assert result.lower == Bound("1.0", expected)


@pytest.mark.unit
class TestUpperBoundSelection:
    """Tests for choosing the result's upper bound."""

    def test_both_infinite(self) -> None:
        result = _intersect("[1.0,)", "[2.0,)")

        assert result.upper.is_infinite
        assert result.to_string() == "[2.0,)"

    def test_one_infinite_keeps_finite_inclusivity(self) -> None:
        result = _intersect("[1.0,)", "[0.5,3.0)")

        assert result.upper == Bound("3.0", False)

    def test_lower_value_wins_with_own_inclusivity(self) -> None:
        result = _intersect("[1.0,5.0]", "[1.0,4.0)")

        assert result.upper == Bound("4.0", False)

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ("[1.0,5.0]", "[1.0,5.0]", True),
            ("[1.0,5.0]", "[1.0,5.0)", False),
            ("[1.0,5.0)", "[1.0,5.0]", False),
            ("[1.0,5.0)", "[1.0,5.0)", False),
        ],
        ids=["inc-inc", "inc-exc", "exc-inc", "exc-exc"],
    )
    def test_equal_values_and_inclusivity(
        self, first: str, second: str, expected: bool
    ) -> None:
        result = _intersect(first, second)

        assert result.upper == Bound("5.0", expected)


@pytest.mark.unit
class TestEmptiness:
    """Tests for empty intersections."""

    def test_lower_above_upper(self) -> None:
        assert _intersect("[3.0,)", "(,2.0]") is None

    def test_point_excluded_by_upper(self) -> None:
        assert _intersect("[2.0,3.0]", "[1.0,2.0)") is None

    def test_point_excluded_by_lower(self) -> None:
        assert _intersect("(2.0,3.0]", "[1.0,2.0]") is None

    def test_unbounded_sides_never_empty(self) -> None:
        result = _intersect("(,2.0)", "(,1.0]")

        assert result == parse_range("(,1.0]")

    def test_inputs_are_not_modified(self) -> None:
        first = parse_range("[1.0,2.0)")
        second = parse_range("[1.5,3.0]")

        RangeIntersector().intersect(first, second)

        assert first == parse_range("[1.0,2.0)")
        assert second == parse_range("[1.5,3.0]")


_SAMPLE_RANGES = [
    "[1.0,2.0]",
    "[1.0,2.0)",
    "(1.0,2.0]",
    "(1.0,2.0)",
    "[2.0,3.0]",
    "(2.0,3.0)",
    "(,1.5]",
    "(,2.0)",
    "[1.5,)",
    "(2.0,)",
    "[2.0]",
    "[1.0-rc1,1.0]",
]


@pytest.mark.unit
class TestSetProperties:
    """Tests that intersection behaves like set intersection."""

    @pytest.mark.parametrize(
        "first,second",
        list(product(_SAMPLE_RANGES, repeat=2)),
    )
    def test_commutative(self, first: str, second: str) -> None:
        assert _intersect(first, second) == _intersect(second, first)

    @pytest.mark.parametrize("text", _SAMPLE_RANGES)
    def test_idempotent(self, text: str) -> None:
        result = _intersect(text, text)

        assert result == parse_range(text)
        assert result.to_string() == text

    def test_equal_versions_with_different_spelling(self) -> None:
        """Test the chosen spelling does not depend on argument order."""
        cmp = VersionComparator("pep440")
        intersector = RangeIntersector(cmp)
        first = parse_range("[1.0,3)")
        second = parse_range("[1.0.0,3.0)")

        forward = intersector.intersect(first, second)
        backward = intersector.intersect(second, first)

        assert forward == backward
        assert forward.to_string() == "[1.0,3)"


@pytest.mark.unit
class TestIntersectAll:
    def test_folds_ranges(self) -> None:
        ranges = [parse_range(t) for t in ("(,5.0)", "[2.0,)", "[3.0,4.0]")]

        assert RangeIntersector().intersect_all(ranges) == parse_range("[3.0,4.0]")

    def test_single_range_returned_as_is(self) -> None:
        rng = parse_range("[1.0,2.0)")

        assert RangeIntersector().intersect_all([rng]) is rng

    def test_empty_intermediate_result(self) -> None:
        ranges = [parse_range(t) for t in ("[1.0,2.0)", "[3.0,4.0)", "(,10.0]")]

        assert RangeIntersector().intersect_all(ranges) is None

    def test_no_ranges_raises(self) -> None:
        with pytest.raises(ValueError):
            RangeIntersector().intersect_all([])


@pytest.mark.unit
class TestIntersectRanges:
    """Tests for the string-in, string-out API."""

    def test_returns_serialized_result(self) -> None:
        assert intersect_ranges("(,5.0)", "[2.0,)") == "[2.0,5.0)"

    def test_single_value_result(self) -> None:
        assert intersect_ranges("[1.2.3]", "[1.2.3]") == "[1.2.3]"

    def test_touching_inclusive_result(self) -> None:
        result = intersect_ranges("[1.0,2.0]", "[2.0,3.0]")

        assert result == "[2.0]"
        assert parse_range(result) == parse_range("[2.0,2.0]")

    def test_very_long_numeric_bound(self) -> None:
        huge = "1" * 5000

        assert intersect_ranges("[" + huge + ",)", "[1.0,)") == "[" + huge + ",)"

    def test_empty_returns_none(self) -> None:
        assert intersect_ranges("[1.0,2.0)", "[3.0,4.0)") is None

    def test_malformed_returns_none_and_warns(
        self, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(logging.getLogger("verrange"), "propagate", True)

        with caplog.at_level(logging.WARNING, logger="verrange"):
            assert intersect_ranges("1.0,2.0", "[1.0,)") is None

        assert "Cannot intersect" in caplog.text

    def test_invalid_version_for_scheme_returns_none(self) -> None:
        cmp = VersionComparator("pep440")

        assert intersect_ranges("[not-a-version,2.0)", "[1.0,)", cmp) is None

    def test_custom_ordering(self) -> None:
        """Test a reversed ordering flips which bound is tighter."""

        def reverse(a: str, b: str) -> int:
            return compare_gradle(b, a)

        assert intersect_ranges("[2.0,1.0]", "[3.0,1.5]", reverse) == "[2.0,1.5]"

    def test_custom_parser(self) -> None:
        parser = RangeParser(ivy_brackets=False)

        assert intersect_ranges("]1.0,2.0[", "[1.0,)", parser=parser) is None
        assert intersect_ranges("(1.0,2.0)", "[1.0,)", parser=parser) == "(1.0,2.0)"
