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

"""Type-keyed registry with lifecycle policies and parent delegation.

This module provides a small service locator that:
- Maps a type identifier to a zero-argument factory
- Supports cached (first-call memoized) and transient (always fresh) bindings
- Delegates lookup misses to an optional parent registry
- Lets a child registry shadow any ancestor binding

Design Principles:
- Explicit over implicit (no auto-wiring, no reflection)
- Additive only: bindings are never replaced or removed
- Any hashable value may serve as a type identifier (classes, strings, enums)

Example Usage:
    from boundkit.core.registry import BindingPolicy, TypeRegistry

    root = TypeRegistry()
    root.bind(Clock, SystemClock, BindingPolicy.CACHED)
    root.bind(RequestId, lambda: RequestId.new(), BindingPolicy.TRANSIENT)

    clock = root.resolve(Clock)

    # Child registries shadow their ancestors
    test_scope = root.create_child()
    test_scope.bind(Clock, FrozenClock, BindingPolicy.CACHED)
    test_scope.resolve(Clock)       # FrozenClock instance
    test_scope.resolve(RequestId)   # delegated to root

Not thread-safe: callers sharing a registry across threads must hold their
own lock around every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    List,
    Optional,
    TypeVar,
    cast,
)

from boundkit.core.errors import (
    AlreadyBoundError,
    InvalidArgumentError,
    NotBoundError,
    describe_type_id,
)

if TYPE_CHECKING:
    from boundkit.config.settings import BoundkitSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks a cached binding whose factory has not run yet; None is a valid value
_UNSET: Any = object()


class BindingPolicy(Enum):
    """Defines how long a resolved value lives.

    Values:
        CACHED: Factory runs on first resolve; the value is kept for the
            registry's lifetime
        TRANSIENT: Factory runs on every resolve
    """

    CACHED = "cached"
    TRANSIENT = "transient"


@dataclass
class Binding(Generic[T]):
    """Describes how to produce the value bound to a type identifier."""

    type_id: Hashable
    factory: Callable[[], T]
    policy: BindingPolicy
    _value: Any = field(default=_UNSET, repr=False)

    @property
    def is_materialized(self) -> bool:
        """Whether a cached value is present."""
        return self._value is not _UNSET

    @property
    def cached_value(self) -> Optional[T]:
        """The cached value, or None while absent."""
        return None if self._value is _UNSET else cast(T, self._value)

    def get_instance(self) -> T:
        """Produce a value according to the binding's policy."""
        if self.policy is BindingPolicy.TRANSIENT:
            return self.factory()

        if self._value is _UNSET:
            self._value = self.factory()
            logger.debug(f"Materialized cached value for {describe_type_id(self.type_id)}")
        return cast(T, self._value)


def _coerce_policy(policy: Any) -> BindingPolicy:
    if policy is None:
        raise InvalidArgumentError("Policy cannot be None", argument="policy")
    if isinstance(policy, BindingPolicy):
        return policy
    try:
        return BindingPolicy(str(policy).lower())
    except ValueError as e:
        valid = [p.value for p in BindingPolicy]
        raise InvalidArgumentError(
            f"Invalid binding policy: {policy!r}. Must be one of {valid}",
            argument="policy",
            cause=e,
        ) from e


def _require_type_id(type_id: Any) -> None:
    if type_id is None:
        raise InvalidArgumentError("Type cannot be None", argument="type_id")
    try:
        hash(type_id)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Type identifier must be hashable, got {type(type_id).__name__}",
            argument="type_id",
            cause=e,
        ) from e


class TypeRegistry:
    """Registry mapping type identifiers to factories.

    Lookup walks from this registry up through its ancestors and uses the
    first binding found, so a local binding always shadows an inherited one.
    The child holds a reference to its parent and never the reverse.

    Args:
        parent: Registry to delegate lookup misses to
        settings: Settings supplying the default policy for provide();
            the process-wide settings when omitted
    """

    def __init__(
        self,
        parent: Optional["TypeRegistry"] = None,
        settings: Optional["BoundkitSettings"] = None,
    ) -> None:
        if parent is not None and not isinstance(parent, TypeRegistry):
            raise InvalidArgumentError(
                f"Parent must be a TypeRegistry, got {type(parent).__name__}",
                argument="parent",
            )
        self._parent = parent
        self._settings = settings
        self._bindings: Dict[Hashable, Binding[Any]] = {}

    @property
    def parent(self) -> Optional["TypeRegistry"]:
        """Registry that lookup misses are delegated to."""
        return self._parent

    @property
    def depth(self) -> int:
        """Number of ancestors above this registry."""
        depth = 0
        current = self._parent
        while current is not None:
            depth += 1
            current = current._parent
        return depth

    def bind(
        self,
        type_id: Hashable,
        factory: Callable[[], T],
        policy: BindingPolicy,
    ) -> "TypeRegistry":
        """Bind a type identifier to a factory.

        Args:
            type_id: Hashable identifier (class, string, enum member, ...)
            factory: Zero-argument callable producing the value
            policy: BindingPolicy member or its string value

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If any argument is None or unusable
            AlreadyBoundError: If type_id is already bound in this registry
        """
        _require_type_id(type_id)
        if factory is None:
            raise InvalidArgumentError("Provider cannot be None", argument="factory")
        if not callable(factory):
            raise InvalidArgumentError(
                f"Provider must be callable, got {type(factory).__name__}",
                argument="factory",
            )
        resolved_policy = _coerce_policy(policy)

        if type_id in self._bindings:
            raise AlreadyBoundError(type_id)

        self._bindings[type_id] = Binding(
            type_id=type_id,
            factory=factory,
            policy=resolved_policy,
        )
        logger.debug(f"Bound {describe_type_id(type_id)} with {resolved_policy.value} policy")
        return self

    def bind_instance(self, type_id: Hashable, value: T) -> "TypeRegistry":
        """Bind an existing value as an already materialized cached binding.

        Returns:
            Self for method chaining
        """
        _require_type_id(type_id)
        if type_id in self._bindings:
            raise AlreadyBoundError(type_id)

        self._bindings[type_id] = Binding(
            type_id=type_id,
            factory=lambda: value,
            policy=BindingPolicy.CACHED,
            _value=value,
        )
        logger.debug(f"Bound {describe_type_id(type_id)} instance as cached")
        return self

    def provide(self, type_id: Hashable, factory: Callable[[], T]) -> "TypeRegistry":
        """Bind with the configured ``default_binding_policy``.

        Returns:
            Self for method chaining
        """
        settings = self._settings
        if settings is None:
            from boundkit.config.settings import get_settings

            settings = get_settings()
        return self.bind(type_id, factory, BindingPolicy(settings.default_binding_policy))

    def resolve(self, type_id: Hashable) -> Any:
        """Resolve a value, walking up the ancestor chain on a miss.

        Raises:
            InvalidArgumentError: If type_id is None
            NotBoundError: If no registry in the chain binds type_id
        """
        _require_type_id(type_id)

        registry: Optional[TypeRegistry] = self
        while registry is not None:
            binding = registry._bindings.get(type_id)
            if binding is not None:
                if registry is not self:
                    logger.debug(f"Resolved {describe_type_id(type_id)} from ancestor registry")
                return binding.get_instance()
            registry = registry._parent

        raise NotBoundError(type_id)

    def resolve_optional(self, type_id: Hashable) -> Optional[Any]:
        """Resolve a value, or return None if nothing in the chain binds it."""
        try:
            return self.resolve(type_id)
        except NotBoundError:
            return None

    def is_bound(self, type_id: Hashable, include_ancestors: bool = True) -> bool:
        """Check if a type identifier is bound here (or in an ancestor)."""
        _require_type_id(type_id)
        if type_id in self._bindings:
            return True
        if include_ancestors and self._parent is not None:
            return self._parent.is_bound(type_id)
        return False

    def get_binding(self, type_id: Hashable) -> Optional[Binding[Any]]:
        """Get this registry's own binding for type_id, if any."""
        return self._bindings.get(type_id)

    def bound_types(self) -> List[Hashable]:
        """Get this registry's own type identifiers in binding order."""
        return list(self._bindings.keys())

    def create_child(self) -> "TypeRegistry":
        """Create a registry that delegates misses to this one."""
        return TypeRegistry(parent=self, settings=self._settings)

    def __contains__(self, type_id: object) -> bool:
        try:
            return self.is_bound(type_id)  # type: ignore[arg-type]
        except InvalidArgumentError:
            return False

    def __repr__(self) -> str:
        return f"TypeRegistry(bindings={len(self._bindings)}, depth={self.depth})"


__all__ = ["BindingPolicy", "Binding", "TypeRegistry"]
