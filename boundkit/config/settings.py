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

"""Configuration settings with explicit precedence.

Precedence (highest to lowest):
1. Overrides passed to from_sources()
2. Environment variables (BOUNDKIT_*)
3. YAML config file passed to from_sources()
4. .env file
5. Default values

Usage:
    settings = BoundkitSettings.from_sources(
        overrides={"default_buffer_capacity": 64},
        config_file=Path("boundkit.yaml"),
    )

    buffer = BoundedBuffer.from_settings(settings)
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from boundkit.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BoundkitSettings(BaseSettings):
    """Defaults used when callers do not state capacity, policy or log level."""

    model_config = SettingsConfigDict(
        env_prefix="BOUNDKIT_",
        env_file=".env" if not os.getenv("BOUNDKIT_SKIP_ENV_FILE") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_buffer_capacity: int = Field(
        default=16, gt=0, description="Capacity of buffers built by BoundedBuffer.from_settings()"
    )
    default_binding_policy: str = Field(
        default="cached", description="Policy used by TypeRegistry.provide() (cached, transient)"
    )
    log_level: str = Field(default="INFO", description="Level for the boundkit logger")

    @field_validator("default_binding_policy")
    @classmethod
    def validate_binding_policy(cls, v: str) -> str:
        """Validate binding policy name."""
        valid_policies = ["cached", "transient"]
        normalized = v.lower()
        if normalized not in valid_policies:
            raise ValueError(
                f"Invalid default_binding_policy: {v}. Must be one of {valid_policies}"
            )
        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        normalized = v.upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return normalized

    @classmethod
    def from_sources(
        cls,
        overrides: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
    ) -> "BoundkitSettings":
        """Load settings with proper precedence.

        Args:
            overrides: Explicit values (highest priority); None values are ignored
            config_file: YAML file with top-level setting keys

        Returns:
            BoundkitSettings instance with all sources merged

        Raises:
            ConfigurationError: If the YAML file cannot be parsed or a value
                fails validation
        """
        settings_dict: Dict[str, Any] = {}

        if config_file is not None and Path(config_file).exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    file_settings = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Failed to parse {config_file}: {e}", config_key=str(config_file), cause=e
                ) from e
            if not isinstance(file_settings, dict):
                raise ConfigurationError(
                    f"Expected a mapping in {config_file}, got {type(file_settings).__name__}",
                    config_key=str(config_file),
                )
            for key, value in file_settings.items():
                if key in cls.model_fields:
                    settings_dict[key] = value
                else:
                    logger.debug(f"Ignoring unknown setting {key!r} in {config_file}")

        try:
            # Environment variables take precedence over init kwargs from the file
            environ = {k.upper() for k in os.environ}
            settings = cls(
                **{
                    k: v
                    for k, v in settings_dict.items()
                    if f"BOUNDKIT_{k.upper()}" not in environ
                }
            )

            if overrides:
                filtered = {
                    k: v for k, v in overrides.items() if v is not None and k in cls.model_fields
                }
                if filtered:
                    settings = cls(**{**settings.model_dump(), **filtered})
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e

        return settings


_settings: Optional[BoundkitSettings] = None
_settings_lock = threading.Lock()


def get_settings() -> BoundkitSettings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = BoundkitSettings.from_sources()
        return _settings


def set_settings(settings: BoundkitSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    with _settings_lock:
        _settings = settings


def reset_settings() -> None:
    """Forget the process-wide settings (for testing)."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "BoundkitSettings",
    "VALID_LOG_LEVELS",
    "get_settings",
    "set_settings",
    "reset_settings",
]
