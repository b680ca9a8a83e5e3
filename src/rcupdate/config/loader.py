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

"""Configuration loading for rcupdate.

The configuration file is optional. It is looked up in this order, first hit
wins:

1. An explicit path (``--config`` or ``RCUPDATE_CONFIG``); it must exist.
2. ``/etc/rc-update.toml``; silently skipped when absent.

Without a file, built-in defaults describe a standard OpenRC tree under ``/``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from rcupdate.compat import tomllib

from .models import Config, ConfigModel, ConfigReadError, InvalidConfigFileError, config_from_model

logger: logging.Logger = logging.getLogger("rcupdate.config")

SYSTEM_CONFIG_PATH: Final[Path] = Path("/etc/rc-update.toml")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: File the configuration was loaded from, or None for defaults.
    """

    config: Config
    path: Path | None


def load_config_with_metadata(
    explicit_path: Path | None = None,
    *,
    system_path: Path = SYSTEM_CONFIG_PATH,
) -> LoadedConfig:
    """Load rcupdate configuration with metadata about the source file.

    Args:
        explicit_path: Configuration file requested by the caller. When given,
            it must exist and no other location is consulted.
        system_path: System-wide file consulted when no explicit path is given.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If the file cannot be read or is not valid TOML.
        InvalidConfigFileError: If the payload fails schema validation.
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    if explicit_path is not None:
        return _load_file(explicit_path)
    if system_path.is_file():
        return _load_file(system_path)
    logger.debug("No configuration file found; using defaults")
    return LoadedConfig(config=Config(), path=None)


def _load_file(path: Path) -> LoadedConfig:
    try:
        raw: dict[str, object] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc
    try:
        model = ConfigModel.model_validate(raw)
    except ValidationError as exc:
        raise InvalidConfigFileError(path, exc) from exc
    logger.debug("Loaded configuration from %s", path)
    return LoadedConfig(config=config_from_model(model), path=path)


__all__ = ["SYSTEM_CONFIG_PATH", "LoadedConfig", "load_config_with_metadata"]
