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

"""Logging setup for boundkit.

boundkit modules log through ``logging.getLogger(__name__)`` and never
install handlers on import. Applications that want boundkit's debug
records call configure_logging() once at startup.
"""

import logging
from typing import Optional

# Custom TRACE level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER_NAME = "boundkit"


def resolve_level(log_level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    level_upper = log_level.upper()
    if level_upper == "TRACE":
        return TRACE
    level = logging.getLevelName(level_upper)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the ``boundkit`` logger.

    Args:
        log_level: Level name (TRACE, DEBUG, INFO, ...). Defaults to the
            ``log_level`` setting.
        handler: Handler to attach. A stderr StreamHandler is attached when
            omitted and the logger has none yet.

    Returns:
        The configured ``boundkit`` logger
    """
    if log_level is None:
        from boundkit.config.settings import get_settings

        log_level = get_settings().log_level

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(resolve_level(log_level))

    if handler is not None:
        root.addHandler(handler)
    elif not root.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(stream)

    return root


__all__ = ["TRACE", "ROOT_LOGGER_NAME", "resolve_level", "configure_logging"]
