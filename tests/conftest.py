# Copyright 2025 CrownOps Engineering
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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from rcupdate._internal.logging_utils import CHILD_LOGGERS, ROOT_LOGGER_NAME  # noqa: E402
from rcupdate.config import RegistryPaths  # noqa: E402
from tests.fixtures.registry import InMemoryRegistry  # noqa: E402
from tests.fixtures.trees import build_tree  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (filesystem or full CLI runs)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def _reset_rcupdate_logging() -> Iterator[None]:
    """Undo ``configure_logging`` so later tests can rely on ``caplog``."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.propagate = True
    root_logger.setLevel(logging.NOTSET)
    for name in CHILD_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def registry() -> InMemoryRegistry:
    """Registry with runlevels ``default`` and ``boot``; sshd is in boot."""
    return InMemoryRegistry(
        services=["cron", "net.lo", "sshd"],
        memberships={"default": {"cron"}, "boot": {"net.lo", "sshd"}},
        current="default",
    )


@pytest.fixture
def system_root(tmp_path: Path) -> Path:
    """On-disk OpenRC tree mirroring the ``registry`` fixture."""
    _ = build_tree(
        tmp_path,
        services=["cron", "net.lo", "sshd"],
        runlevels={"default": ["cron"], "boot": ["net.lo", "sshd"]},
        softlevel="default",
    )
    return tmp_path


@pytest.fixture
def system_paths(system_root: Path) -> RegistryPaths:
    return RegistryPaths.under(system_root)
