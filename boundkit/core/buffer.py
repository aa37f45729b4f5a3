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

"""Fixed-capacity FIFO buffer.

Bulk operations follow the producer/consumer variance rule:
- insert_all() reads from a covariant source (``Iterable[T]`` accepts an
  iterable of any subtype of T)
- drain_to() writes into a contravariant sink and tests elements with a
  contravariant predicate (both may be typed on a supertype of T)

Example Usage:
    from boundkit.core.buffer import BoundedBuffer

    buffer: BoundedBuffer[int] = BoundedBuffer(5)
    buffer.insert_all(range(7))          # 5, the rest is dropped

    evens: list[object] = []
    buffer.drain_to(evens, lambda n: n % 2 == 0)  # 3, evens == [0, 2, 4]
    buffer.remove()                      # 1

Not thread-safe: callers sharing a buffer across threads must hold their
own lock around every call.
"""

from __future__ import annotations

import logging
from collections import deque
from itertools import islice
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Deque,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TypeVar,
    Union,
)

from boundkit.core.errors import InvalidArgumentError
from boundkit.core.protocols import Predicate, SetSink, Sink

if TYPE_CHECKING:
    from boundkit.config.settings import BoundkitSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedBuffer(Generic[T]):
    """FIFO container that never holds more than ``capacity`` items.

    Args:
        capacity: Maximum number of items, fixed for the buffer's lifetime

    Raises:
        InvalidArgumentError: If capacity is not a positive integer
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError(
                f"Capacity must be an integer, got {type(capacity).__name__}",
                argument="capacity",
            )
        if capacity <= 0:
            raise InvalidArgumentError("Capacity must be positive", argument="capacity")

        self._capacity = capacity
        self._items: Deque[T] = deque()

    @classmethod
    def from_settings(cls, settings: Optional["BoundkitSettings"] = None) -> "BoundedBuffer[Any]":
        """Create a buffer sized by ``default_buffer_capacity``.

        Args:
            settings: Settings to read; the process-wide settings when omitted
        """
        if settings is None:
            from boundkit.config.settings import get_settings

            settings = get_settings()
        return cls(settings.default_buffer_capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of items."""
        return self._capacity

    @property
    def remaining_capacity(self) -> int:
        """Number of items that can still be inserted."""
        return self._capacity - len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate front to back without removing anything."""
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"BoundedBuffer(capacity={self._capacity}, items={list(self._items)!r})"

    def insert(self, item: T) -> bool:
        """Append an item to the back if there is room.

        Returns:
            True if inserted, False if the buffer is full (buffer unchanged)
        """
        if len(self._items) < self._capacity:
            self._items.append(item)
            return True
        return False

    def remove(self) -> Optional[T]:
        """Remove and return the front item, or None if the buffer is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def insert_all(self, source: Iterable[T]) -> int:
        """Append as many leading items of ``source`` as fit, in source order.

        Best effort: items beyond the free capacity are skipped silently and
        are never pulled from the source.

        Args:
            source: Items to read; any iterable of T or a subtype of T

        Returns:
            Number of items inserted

        Raises:
            InvalidArgumentError: If source is None
        """
        if source is None:
            raise InvalidArgumentError("Source cannot be None", argument="source")

        free = self._capacity - len(self._items)
        before = len(self._items)
        self._items.extend(islice(source, free))
        added = len(self._items) - before

        if hasattr(source, "__len__") and len(source) > added:  # type: ignore[arg-type]
            logger.debug(
                f"insert_all truncated: {added} of {len(source)} items accepted"  # type: ignore[arg-type]
            )
        return added

    def drain_to(
        self,
        sink: Union[Sink[T], SetSink[T]],
        predicate: Predicate[T],
    ) -> int:
        """Move every item matching ``predicate`` into ``sink``.

        Items are visited front to back exactly once. Matching items are
        written to the sink in that order; non-matching items stay in the
        buffer in their original relative order.

        Args:
            sink: Destination with ``append`` or ``add``, typed on T or a supertype
            predicate: Test applied to each item, typed on T or a supertype

        Returns:
            Number of items moved

        Raises:
            InvalidArgumentError: If sink or predicate is None, or sink has
                neither ``append`` nor ``add``
        """
        if sink is None:
            raise InvalidArgumentError("Sink cannot be None", argument="sink")
        if predicate is None:
            raise InvalidArgumentError("Predicate cannot be None", argument="predicate")
        put = self._sink_writer(sink)

        # Predicate failures leave the buffer and sink untouched
        items: List[T] = list(self._items)
        hits = [bool(predicate(item)) for item in items]

        # An item leaves the buffer only once the sink has accepted it
        moved: Set[int] = set()
        try:
            for index, item in enumerate(items):
                if hits[index]:
                    put(item)
                    moved.add(index)
        finally:
            self._items = deque(item for index, item in enumerate(items) if index not in moved)

        logger.debug(f"drain_to moved {len(moved)} items, {len(self._items)} remain")
        return len(moved)

    @staticmethod
    def _sink_writer(sink: Any) -> Callable[[Any], Any]:
        writer = getattr(sink, "append", None) or getattr(sink, "add", None)
        if not callable(writer):
            raise InvalidArgumentError(
                f"Sink {type(sink).__name__} has no append() or add()", argument="sink"
            )
        return writer


__all__ = ["BoundedBuffer"]
