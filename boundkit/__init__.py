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

"""
boundkit - small generic containers with explicit variance and lifecycle rules.

    from boundkit import BoundedBuffer, Interval, TypeRegistry, BindingPolicy

    Interval(1, 10).intersect(Interval(5, 15))   # Interval(low=5, high=10)

    buffer = BoundedBuffer(5)
    buffer.insert_all(range(7))                   # 5

    registry = TypeRegistry()
    registry.bind(Clock, SystemClock, BindingPolicy.CACHED)
    registry.create_child().resolve(Clock)
"""

__version__ = "0.1.0"
__author__ = "Vijaykumar Singh"
__email__ = "singhvjd@gmail.com"
__license__ = "Apache-2.0"

from boundkit.config import BoundkitSettings, get_settings
from boundkit.core import (
    AlreadyBoundError,
    Binding,
    BindingPolicy,
    BoundedBuffer,
    BoundkitError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    Interval,
    InvalidArgumentError,
    NotBoundError,
    RangesDisjointError,
    TypeRegistry,
    cover,
    max_of,
    min_of,
)
from boundkit.logging_config import configure_logging

__all__ = [
    "__version__",
    "AlreadyBoundError",
    "Binding",
    "BindingPolicy",
    "BoundedBuffer",
    "BoundkitError",
    "BoundkitSettings",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "Interval",
    "InvalidArgumentError",
    "NotBoundError",
    "RangesDisjointError",
    "TypeRegistry",
    "configure_logging",
    "cover",
    "get_settings",
    "max_of",
    "min_of",
]
