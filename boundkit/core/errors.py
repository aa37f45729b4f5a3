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

"""Error taxonomy for boundkit.

This module provides:
- Error categories and severities for classification
- A structured base exception carrying details and recovery hints
- The concrete errors raised by intervals, buffers and registries

Every error is raised synchronously at the offending call. Nothing in
boundkit retries, logs-and-continues, or swallows these errors.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


# =============================================================================
# Error Categories
# =============================================================================


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""

    # Argument errors
    INVALID_ARGUMENT = "invalid_argument"
    RANGES_DISJOINT = "ranges_disjoint"

    # Registry errors
    ALREADY_BOUND = "already_bound"
    NOT_BOUND = "not_bound"

    # Configuration errors
    CONFIG_INVALID = "config_invalid"

    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# =============================================================================
# Custom Exception Types
# =============================================================================


class BoundkitError(Exception):
    """Base exception for all boundkit errors.

    Provides structured error information including:
    - Error category and severity
    - Correlation ID for tracking
    - Recovery suggestions
    - Original exception chain
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None,
        recovery_hint: Optional[str] = None,
        correlation_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}
        self.recovery_hint = recovery_hint
        self.correlation_id = correlation_id or str(uuid.uuid4())[:8]
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "correlation_id": self.correlation_id,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        result = f"[{self.correlation_id}] {self.message}"
        if self.recovery_hint:
            result += f"\nRecovery hint: {self.recovery_hint}"
        return result


class InvalidArgumentError(BoundkitError, ValueError):
    """A required argument is missing or has an unusable value."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("category", ErrorCategory.INVALID_ARGUMENT)
        super().__init__(message, **kwargs)
        self.argument = argument
        self.details["argument"] = argument


class RangesDisjointError(InvalidArgumentError):
    """Intersection was requested between intervals that do not overlap."""

    def __init__(self, first: Any, second: Any, **kwargs: Any):
        super().__init__(
            "Ranges do not overlap",
            argument="other",
            category=ErrorCategory.RANGES_DISJOINT,
            recovery_hint="Check overlaps() first, or use span() for a covering interval.",
            **kwargs,
        )
        self.first = first
        self.second = second
        self.details["first"] = str(first)
        self.details["second"] = str(second)


def describe_type_id(type_id: Any) -> str:
    """Name a type identifier: classes by __name__, other keys by str()."""
    return type_id.__name__ if hasattr(type_id, "__name__") else str(type_id)


class AlreadyBoundError(BoundkitError):
    """The type identifier already has a binding in this registry instance."""

    def __init__(self, type_id: Any, **kwargs: Any):
        super().__init__(
            f"Type {describe_type_id(type_id)} is already bound",
            category=ErrorCategory.ALREADY_BOUND,
            recovery_hint="Bind the type in a child registry to shadow the existing binding.",
            **kwargs,
        )
        self.type_id = type_id
        self.details["type_id"] = describe_type_id(type_id)


class NotBoundError(BoundkitError, LookupError):
    """No registry in the ancestor chain has a binding for the type identifier."""

    def __init__(self, type_id: Any, **kwargs: Any):
        super().__init__(
            f"Type {describe_type_id(type_id)} is not bound",
            category=ErrorCategory.NOT_BOUND,
            **kwargs,
        )
        self.type_id = type_id
        self.details["type_id"] = describe_type_id(type_id)


class ConfigurationError(BoundkitError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(
            message,
            category=ErrorCategory.CONFIG_INVALID,
            **kwargs,
        )
        self.config_key = config_key
        self.details["config_key"] = config_key


__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "BoundkitError",
    "InvalidArgumentError",
    "RangesDisjointError",
    "AlreadyBoundError",
    "NotBoundError",
    "ConfigurationError",
    "describe_type_id",
]
