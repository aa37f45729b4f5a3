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

"""Shared pytest fixtures and configuration."""

import logging

import pytest

from boundkit.config.settings import BoundkitSettings, reset_settings
from boundkit.core.registry import TypeRegistry


@pytest.fixture(autouse=True)
def isolate_environment_variables(monkeypatch):
    """Isolate tests from BOUNDKIT_* environment variables and .env files.

    Settings are also reset so each test loads its own process-wide copy.
    """
    monkeypatch.setenv("BOUNDKIT_SKIP_ENV_FILE", "1")
    monkeypatch.setitem(BoundkitSettings.model_config, "env_file", None)

    for var in (
        "BOUNDKIT_DEFAULT_BUFFER_CAPACITY",
        "BOUNDKIT_DEFAULT_BINDING_POLICY",
        "BOUNDKIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def boundkit_logger():
    """The boundkit root logger, restored to its original state afterwards."""
    logger = logging.getLogger("boundkit")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def three_level_chain():
    """Grandparent -> parent -> child registries, all empty."""
    grandparent = TypeRegistry()
    parent = TypeRegistry(parent=grandparent)
    child = TypeRegistry(parent=parent)
    return grandparent, parent, child
