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

"""Immutable closed intervals over totally ordered values.

An Interval is a value type: two intervals with equal bounds are equal and
hash alike, and every operation that would change an interval returns a new
one instead.

Example Usage:
    from boundkit.core.interval import Interval, cover

    working_hours = Interval(9, 17)
    working_hours.contains(12)                # True
    working_hours.intersect(Interval(15, 20)) # Interval(low=15, high=17)
    working_hours.span(Interval(20, 22))      # Interval(low=9, high=22)
    working_hours.clamp(23)                   # 17

    cover([4, 8, 1, 6])                       # Interval(low=1, high=8)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Optional

from boundkit.core.errors import InvalidArgumentError, RangesDisjointError
from boundkit.core.protocols import TOrdered


def _less(left: Any, right: Any) -> bool:
    """Compare two values, reporting incomparable types as an argument error."""
    try:
        return bool(left < right)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Cannot compare {type(left).__name__} with {type(right).__name__}",
            cause=e,
        ) from e


@dataclass(frozen=True)
class Interval(Generic[TOrdered]):
    """Closed interval ``[low, high]`` with ``low <= high``.

    Attributes:
        low: Lower bound (inclusive)
        high: Upper bound (inclusive)

    Raises:
        InvalidArgumentError: If a bound is None, the bounds are not
            comparable, or low > high
    """

    low: TOrdered
    high: TOrdered

    def __post_init__(self) -> None:
        if self.low is None or self.high is None:
            raise InvalidArgumentError("Low and high cannot be None", argument="low/high")
        if _less(self.high, self.low):
            raise InvalidArgumentError(
                f"Low must be <= high (got {self.low!r} > {self.high!r})",
                argument="low/high",
            )

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def contains(self, value: Optional[TOrdered]) -> bool:
        """Check whether ``low <= value <= high``. None is never contained."""
        if value is None:
            return False
        return not _less(value, self.low) and not _less(self.high, value)

    def overlaps(self, other: Optional["Interval[TOrdered]"]) -> bool:
        """Check whether the intervals share at least one point.

        Touching endpoints count as overlap. None never overlaps.
        """
        if other is None:
            return False
        self._require_interval(other)
        return not _less(other.high, self.low) and not _less(self.high, other.low)

    def intersect(self, other: "Interval[TOrdered]") -> "Interval[TOrdered]":
        """Return the tightest interval contained in both.

        Raises:
            InvalidArgumentError: If other is None
            RangesDisjointError: If the intervals do not overlap
        """
        if other is None:
            raise InvalidArgumentError("Other interval cannot be None", argument="other")
        if not self.overlaps(other):
            raise RangesDisjointError(self, other)

        low = other.low if _less(self.low, other.low) else self.low
        high = other.high if _less(other.high, self.high) else self.high
        return Interval(low, high)

    def span(self, other: "Interval[TOrdered]") -> "Interval[TOrdered]":
        """Return the smallest interval covering both, overlapping or not."""
        if other is None:
            raise InvalidArgumentError("Other interval cannot be None", argument="other")
        self._require_interval(other)

        low = other.low if _less(other.low, self.low) else self.low
        high = other.high if _less(self.high, other.high) else self.high
        return Interval(low, high)

    def clamp(self, value: TOrdered) -> TOrdered:
        """Return the nearest value inside the interval.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Value cannot be None", argument="value")
        if _less(value, self.low):
            return self.low
        if _less(self.high, value):
            return self.high
        return value

    @staticmethod
    def _require_interval(other: object) -> None:
        if not isinstance(other, Interval):
            raise InvalidArgumentError(
                f"Expected an Interval, got {type(other).__name__}", argument="other"
            )


def _materialize(items: Optional[Iterable[TOrdered]]) -> List[TOrdered]:
    if items is None:
        raise InvalidArgumentError("Collection cannot be null or empty", argument="items")
    values = list(items)
    if not values:
        raise InvalidArgumentError("Collection cannot be null or empty", argument="items")
    return values


def max_of(items: Optional[Iterable[TOrdered]]) -> TOrdered:
    """Return the greatest element; the first one wins among equals.

    Raises:
        InvalidArgumentError: If items is None or empty
    """
    values = _materialize(items)
    best = values[0]
    for item in values[1:]:
        if _less(best, item):
            best = item
    return best


def min_of(items: Optional[Iterable[TOrdered]]) -> TOrdered:
    """Return the least element; the first one wins among equals.

    Raises:
        InvalidArgumentError: If items is None or empty
    """
    values = _materialize(items)
    best = values[0]
    for item in values[1:]:
        if _less(item, best):
            best = item
    return best


def cover(items: Optional[Iterable[TOrdered]]) -> Interval[TOrdered]:
    """Return ``[min(items), max(items)]``.

    Raises:
        InvalidArgumentError: If items is None or empty
    """
    values = _materialize(items)
    return Interval(min_of(values), max_of(values))


__all__ = ["Interval", "max_of", "min_of", "cover"]
