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

"""Core containers for boundkit.

This package provides:
- Interval: immutable closed interval over ordered values
- BoundedBuffer: fixed-capacity FIFO with variance-aware bulk operations
- TypeRegistry: type-keyed registry with cached/transient bindings
- The error taxonomy shared by all three
"""

from boundkit.core.buffer import BoundedBuffer
from boundkit.core.errors import (
    AlreadyBoundError,
    BoundkitError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    InvalidArgumentError,
    NotBoundError,
    RangesDisjointError,
)
from boundkit.core.interval import Interval, cover, max_of, min_of
from boundkit.core.protocols import Predicate, SetSink, Sink, SupportsOrdering
from boundkit.core.registry import Binding, BindingPolicy, TypeRegistry

__all__ = [
    # Interval
    "Interval",
    "cover",
    "max_of",
    "min_of",
    # Buffer
    "BoundedBuffer",
    # Registry
    "Binding",
    "BindingPolicy",
    "TypeRegistry",
    # Protocols
    "Predicate",
    "SetSink",
    "Sink",
    "SupportsOrdering",
    # Errors
    "AlreadyBoundError",
    "BoundkitError",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "InvalidArgumentError",
    "NotBoundError",
    "RangesDisjointError",
]
