# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for immutable closed intervals."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from boundkit.core.errors import ErrorCategory, InvalidArgumentError, RangesDisjointError
from boundkit.core.interval import Interval, cover, max_of, min_of


class TestIntervalConstruction:
    """Tests for Interval construction and value semantics."""

    def test_valid_interval(self):
        """Test constructing an interval keeps both bounds."""
        interval = Interval(1, 10)

        assert interval.low == 1
        assert interval.high == 10

    def test_single_point_interval(self):
        """Test low == high is allowed."""
        interval = Interval(5, 5)

        assert interval.contains(5)

    def test_low_greater_than_high_raises(self):
        """Test that a reversed range is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Interval(10, 1)

        assert "Low must be <= high" in str(exc_info.value)

    @pytest.mark.parametrize("low,high", [(None, 1), (1, None), (None, None)])
    def test_none_bound_raises(self, low, high):
        """Test that absent bounds are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Interval(low, high)

        assert "cannot be None" in str(exc_info.value)

    def test_incomparable_bounds_raise(self):
        """Test that bounds without a common order are rejected."""
        with pytest.raises(InvalidArgumentError):
            Interval(1, "10")

    def test_invalid_argument_is_value_error(self):
        """Test that InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Interval(2, 1)

    def test_interval_is_immutable(self):
        """Test that bounds cannot be reassigned."""
        interval = Interval(1, 10)

        with pytest.raises(dataclasses.FrozenInstanceError):
            interval.low = 0  # type: ignore[misc]

    def test_equality_and_hash(self):
        """Test intervals with equal bounds are equal and hash alike."""
        assert Interval(1, 10) == Interval(1, 10)
        assert Interval(1, 10) != Interval(1, 11)
        assert hash(Interval(1, 10)) == hash(Interval(1, 10))
        assert {Interval(1, 10): "a"}[Interval(1, 10)] == "a"

    def test_not_equal_to_tuple(self):
        """Test that an interval only equals another interval."""
        assert Interval(1, 10) != (1, 10)

    def test_string_forms(self):
        """Test str and repr rendering."""
        assert str(Interval(1, 10)) == "[1, 10]"
        assert repr(Interval(1, 10)) == "Interval(low=1, high=10)"

    def test_works_with_dates(self):
        """Test any totally ordered type can be used."""
        q1 = Interval(date(2024, 1, 1), date(2024, 3, 31))

        assert q1.contains(date(2024, 2, 29))
        assert not q1.contains(date(2024, 4, 1))


class TestContains:
    """Tests for Interval.contains()."""

    @pytest.mark.parametrize("low,high", [(0, 0), (1, 10), (-5, 5), (100, 1000)])
    def test_endpoints_inclusive(self, low, high):
        """Test both bounds are contained and their neighbours are not."""
        interval = Interval(low, high)

        assert interval.contains(low)
        assert interval.contains(high)
        assert not interval.contains(low - 1)
        assert not interval.contains(high + 1)

    def test_none_not_contained(self):
        """Test None is never contained."""
        assert not Interval(1, 10).contains(None)

    def test_in_operator(self):
        """Test the in operator delegates to contains()."""
        assert 5 in Interval(1, 10)
        assert 11 not in Interval(1, 10)

    def test_mixed_numeric_types(self):
        """Test ints compare against a Decimal interval."""
        assert Interval(Decimal("0.5"), Decimal("1.5")).contains(1)

    def test_incomparable_value_raises(self):
        """Test that an incomparable value is an argument error."""
        with pytest.raises(InvalidArgumentError):
            Interval(1, 10).contains("five")


class TestOverlaps:
    """Tests for Interval.overlaps()."""

    def test_overlapping(self):
        """Test partially overlapping intervals."""
        assert Interval(1, 10).overlaps(Interval(5, 15))

    def test_touching_endpoints_overlap(self):
        """Test that shared endpoints count as overlap."""
        assert Interval(1, 10).overlaps(Interval(10, 20))
        assert Interval(10, 20).overlaps(Interval(1, 10))

    def test_disjoint(self):
        """Test disjoint intervals do not overlap."""
        assert not Interval(1, 5).overlaps(Interval(10, 15))

    def test_containment_overlaps(self):
        """Test a nested interval overlaps its container."""
        assert Interval(1, 100).overlaps(Interval(40, 60))

    def test_none_does_not_overlap(self):
        """Test None never overlaps."""
        assert not Interval(1, 10).overlaps(None)

    @pytest.mark.parametrize(
        "a,b",
        [
            (Interval(1, 10), Interval(5, 15)),
            (Interval(1, 5), Interval(10, 15)),
            (Interval(1, 10), Interval(10, 20)),
            (Interval(3, 4), Interval(1, 100)),
            (Interval(0, 0), Interval(0, 0)),
        ],
    )
    def test_overlaps_is_symmetric(self, a, b):
        """Test a.overlaps(b) == b.overlaps(a)."""
        assert a.overlaps(b) == b.overlaps(a)

    def test_non_interval_raises(self):
        """Test that comparing against a non-interval is an argument error."""
        with pytest.raises(InvalidArgumentError):
            Interval(1, 10).overlaps((1, 10))  # type: ignore[arg-type]


class TestIntersect:
    """Tests for Interval.intersect()."""

    def test_tightest_common_subinterval(self):
        """Test the intersection of partially overlapping intervals."""
        assert Interval(1, 10).intersect(Interval(5, 15)) == Interval(5, 10)

    def test_nested(self):
        """Test intersecting with a nested interval yields the nested one."""
        assert Interval(1, 100).intersect(Interval(40, 60)) == Interval(40, 60)

    def test_touching_yields_single_point(self):
        """Test touching intervals intersect at the shared endpoint."""
        assert Interval(1, 10).intersect(Interval(10, 20)) == Interval(10, 10)

    def test_disjoint_raises(self):
        """Test that disjoint intervals cannot be intersected."""
        with pytest.raises(RangesDisjointError) as exc_info:
            Interval(1, 5).intersect(Interval(10, 15))

        assert "do not overlap" in str(exc_info.value)
        assert exc_info.value.category == ErrorCategory.RANGES_DISJOINT
        assert exc_info.value.details["first"] == "[1, 5]"
        assert exc_info.value.details["second"] == "[10, 15]"

    def test_disjoint_is_invalid_argument(self):
        """Test RangesDisjointError is also an InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            Interval(1, 5).intersect(Interval(10, 15))

    def test_none_raises(self):
        """Test intersecting with None is an argument error."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Interval(1, 5).intersect(None)  # type: ignore[arg-type]

        assert not isinstance(exc_info.value, RangesDisjointError)

    def test_originals_unchanged(self):
        """Test intersect returns a new interval."""
        a = Interval(1, 10)
        b = Interval(5, 15)
        a.intersect(b)

        assert a == Interval(1, 10)
        assert b == Interval(5, 15)


class TestSpan:
    """Tests for Interval.span()."""

    def test_disjoint_span(self):
        """Test span succeeds for disjoint intervals."""
        assert Interval(1, 5).span(Interval(10, 15)) == Interval(1, 15)

    def test_overlapping_span(self):
        """Test span of overlapping intervals."""
        assert Interval(1, 10).span(Interval(5, 15)) == Interval(1, 15)

    def test_span_is_commutative(self):
        """Test a.span(b) == b.span(a)."""
        a = Interval(3, 7)
        b = Interval(-2, 4)

        assert a.span(b) == b.span(a) == Interval(-2, 7)

    def test_none_raises(self):
        """Test span with None is an argument error."""
        with pytest.raises(InvalidArgumentError):
            Interval(1, 5).span(None)  # type: ignore[arg-type]


class TestClamp:
    """Tests for Interval.clamp()."""

    def test_below_returns_low(self):
        """Test values below the interval clamp to low."""
        assert Interval(1, 10).clamp(-3) == 1

    def test_above_returns_high(self):
        """Test values above the interval clamp to high."""
        assert Interval(1, 10).clamp(42) == 10

    def test_in_range_unchanged(self):
        """Test values inside the interval are returned unchanged."""
        for value in range(1, 11):
            assert Interval(1, 10).clamp(value) == value

    @pytest.mark.parametrize("value", [-100, 0, 1, 5, 10, 11, 100])
    def test_clamp_is_idempotent(self, value):
        """Test clamp(clamp(x)) == clamp(x)."""
        interval = Interval(1, 10)

        assert interval.clamp(interval.clamp(value)) == interval.clamp(value)

    def test_none_raises(self):
        """Test clamping None is an argument error."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Interval(1, 10).clamp(None)  # type: ignore[arg-type]

        assert "Value cannot be None" in str(exc_info.value)


class TestAggregates:
    """Tests for max_of(), min_of() and cover()."""

    def test_max_of(self):
        """Test the greatest element is returned."""
        assert max_of([3, 9, 1, 7]) == 9

    def test_min_of(self):
        """Test the least element is returned."""
        assert min_of([3, 9, 1, 7]) == 1

    def test_max_of_accepts_generator(self):
        """Test any iterable is accepted."""
        assert max_of(n * n for n in range(-4, 3)) == 16

    def test_max_of_strings(self):
        """Test aggregates work on any ordered type."""
        assert max_of(["pear", "apple", "zucchini"]) == "zucchini"

    def test_cover(self):
        """Test cover spans the smallest and greatest elements."""
        assert cover([4, 8, 1, 6]) == Interval(1, 8)

    def test_cover_single_element(self):
        """Test a single element covers a single point."""
        assert cover([5]) == Interval(5, 5)

    @pytest.mark.parametrize("items", [[1], [2, 2, 2], [5, -1, 3], list(range(50, 0, -3))])
    def test_cover_high_matches_max(self, items):
        """Test cover(items).high == max_of(items)."""
        assert cover(items).high == max_of(items)
        assert cover(items).low == min_of(items)

    @pytest.mark.parametrize("func", [max_of, min_of, cover])
    @pytest.mark.parametrize("items", [None, [], ()])
    def test_empty_or_none_raises(self, func, items):
        """Test that absent or empty collections are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            func(items)

        assert "Collection cannot be null or empty" in str(exc_info.value)

    def test_max_of_incomparable_raises(self):
        """Test incomparable elements are an argument error."""
        with pytest.raises(InvalidArgumentError):
            max_of([1, "two"])
