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

"""Structural types shared by the boundkit containers.

Variance conventions:
    - Sources read by a container are typed covariantly: a buffer of
      ``Number`` accepts ``Iterable[int]`` because ``Iterable`` is covariant.
    - Sinks written by a container are typed contravariantly: a buffer of
      ``int`` may drain into ``Sink[object]`` because ``Sink`` is
      contravariant in its element type. The same holds for predicates,
      since ``Callable`` is contravariant in its arguments.

Usage Example:
    from boundkit.core.protocols import Sink

    def collect(sink: Sink[int]) -> None:
        sink.append(1)

    everything: list[object] = []
    collect(everything)
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class SupportsOrdering(Protocol):
    """Protocol for values with a total order.

    Interval bounds and the aggregate helpers require ``<`` and ``<=``;
    the remaining comparisons are derived from them.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


TOrdered = TypeVar("TOrdered", bound=SupportsOrdering)


@runtime_checkable
class Sink(Protocol[T_contra]):
    """Write-only destination for drained elements (list-like)."""

    def append(self, item: T_contra, /) -> None: ...


@runtime_checkable
class SetSink(Protocol[T_contra]):
    """Write-only destination for drained elements (set-like)."""

    def add(self, item: T_contra, /) -> None: ...


Predicate = Callable[[T_contra], bool]


__all__ = [
    "SupportsOrdering",
    "TOrdered",
    "Sink",
    "SetSink",
    "Predicate",
]
