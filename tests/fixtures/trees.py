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

"""Builders for on-disk OpenRC trees used by filesystem and CLI tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from rcupdate.config import RegistryPaths

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

__all__ = ["build_tree"]


def build_tree(
    root: Path,
    *,
    services: Iterable[str],
    runlevels: Mapping[str, Iterable[str]],
    softlevel: str | None = None,
) -> RegistryPaths:
    """Create init scripts, runlevel directories and membership links.

    Args:
        root: Directory acting as the system root.
        services: Service names; each gets an executable script.
        runlevels: Runlevel name to its initial member services.
        softlevel: Content of the softlevel file; omitted when ``None``.

    Returns:
        RegistryPaths anchored under ``root``.
    """
    paths = RegistryPaths.under(root)
    paths.init_dir.mkdir(parents=True, exist_ok=True)
    for service in services:
        script = paths.init_dir / service
        _ = script.write_text("#!/sbin/openrc-run\n", encoding="utf-8")
        script.chmod(0o755)
    for runlevel, members in runlevels.items():
        directory = paths.runlevel_dir / runlevel
        directory.mkdir(parents=True, exist_ok=True)
        for member in members:
            os.symlink(paths.link_target(member), directory / member)
    if softlevel is not None:
        paths.state_dir.mkdir(parents=True, exist_ok=True)
        _ = paths.softlevel_path.write_text(f"{softlevel}\n", encoding="utf-8")
    return paths
