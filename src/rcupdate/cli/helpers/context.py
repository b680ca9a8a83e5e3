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

"""Shared CLI context built once per invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rcupdate.config import EnvOverrides, load_config_with_metadata

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from rcupdate.config import Config, RegistryPaths


@dataclass(slots=True, frozen=True)
class CLIContext:
    """Resolved configuration shared by the CLI handlers.

    Attributes:
        config: Loaded configuration (defaults when no file was found).
        config_path: File the configuration came from, if any.
        env: Settings read from the environment.
        registry_paths: Registry directories after root overrides.
    """

    config: Config
    config_path: Path | None
    env: EnvOverrides
    registry_paths: RegistryPaths


def build_cli_context(
    *,
    config_path: Path | None = None,
    root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CLIContext:
    """Load configuration and apply CLI/environment overrides.

    Precedence for both the configuration file and the root directory is
    command line, then environment, then defaults.

    Args:
        config_path: ``--config`` value.
        root: ``--root`` value.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        CLIContext ready for command dispatch.
    """
    env = EnvOverrides.from_environ(environ)
    loaded = load_config_with_metadata(config_path or env.config_path)
    return CLIContext(
        config=loaded.config,
        config_path=loaded.path,
        env=env,
        registry_paths=loaded.config.registry_paths(root or env.root),
    )


__all__ = ["CLIContext", "build_cli_context"]
