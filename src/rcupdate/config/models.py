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

"""Configuration models and validation for rcupdate.

Pydantic models validate the TOML payload; frozen dataclasses carry the
resolved values at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rcupdate._internal.exceptions import RcUpdateConfigurationError

CONFIG_VERSION: Final[int] = 0
DEFAULT_ROOT: Final[Path] = Path("/")
DEFAULT_INIT_DIR: Final[Path] = Path("etc/init.d")
DEFAULT_RUNLEVEL_DIR: Final[Path] = Path("etc/runlevels")
DEFAULT_STATE_DIR: Final[Path] = Path("run/openrc")
SOFTLEVEL_FILENAME: Final[str] = "softlevel"


class ConfigValidationError(RcUpdateConfigurationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value found in the file.
            expected: The config_version value this release understands.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: Configuration file that could not be read.
            error: The underlying exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and validation error.

        Args:
            path: Configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid rcupdate configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class RegistryPaths:
    """Resolved locations of the on-disk service registry.

    Attributes:
        init_dir: Directory holding one executable script per service.
        runlevel_dir: Directory holding one subdirectory per runlevel.
        state_dir: Runtime state directory holding the ``softlevel`` file.
        root: Root of the system tree the directories were resolved under.
    """

    init_dir: Path
    runlevel_dir: Path
    state_dir: Path
    root: Path = DEFAULT_ROOT

    @property
    def softlevel_path(self) -> Path:
        return self.state_dir / SOFTLEVEL_FILENAME

    def link_target(self, service: str) -> Path:
        """Return the init script path as seen from inside the system tree.

        Membership links record this path, so they stay valid once ``root``
        becomes the running system's ``/``. An ``init_dir`` outside ``root``
        is returned unchanged.
        """
        try:
            inside = self.init_dir.relative_to(self.root)
        except ValueError:
            return self.init_dir / service
        return DEFAULT_ROOT / inside / service

    @classmethod
    def under(
        cls,
        root: Path,
        *,
        init_dir: Path = DEFAULT_INIT_DIR,
        runlevel_dir: Path = DEFAULT_RUNLEVEL_DIR,
        state_dir: Path = DEFAULT_STATE_DIR,
    ) -> RegistryPaths:
        """Resolve registry directories against a root directory.

        Absolute directories are kept as given.

        Args:
            root: Root of the system tree.
            init_dir: Service script directory, relative to ``root`` unless absolute.
            runlevel_dir: Runlevel directory, relative to ``root`` unless absolute.
            state_dir: Runtime state directory, relative to ``root`` unless absolute.

        Returns:
            RegistryPaths with every directory anchored under ``root``.
        """
        return cls(
            init_dir=_anchor(root, init_dir),
            runlevel_dir=_anchor(root, runlevel_dir),
            state_dir=_anchor(root, state_dir),
            root=root,
        )


def _anchor(root: Path, value: Path) -> Path:
    return value if value.is_absolute() else root / value


@dataclass(slots=True, frozen=True)
class Config:
    """Top-level runtime configuration for rcupdate.

    Attributes:
        root: Root of the system tree the registry lives under.
        init_dir: Service script directory as configured.
        runlevel_dir: Runlevel directory as configured.
        state_dir: Runtime state directory as configured.
    """

    root: Path = DEFAULT_ROOT
    init_dir: Path = DEFAULT_INIT_DIR
    runlevel_dir: Path = DEFAULT_RUNLEVEL_DIR
    state_dir: Path = DEFAULT_STATE_DIR

    def registry_paths(self, root: Path | None = None) -> RegistryPaths:
        """Return registry paths, optionally re-anchored under another root.

        Args:
            root: Root override; ``None`` keeps the configured root.

        Returns:
            RegistryPaths resolved for this configuration.
        """
        return RegistryPaths.under(
            root if root is not None else self.root,
            init_dir=self.init_dir,
            runlevel_dir=self.runlevel_dir,
            state_dir=self.state_dir,
        )


class RegistryConfigModel(BaseModel):
    """Pydantic model for the ``[registry]`` table.

    Attributes:
        root: Root of the system tree.
        init_dir: Service script directory.
        runlevel_dir: Runlevel directory.
        state_dir: Runtime state directory.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    root: Path = DEFAULT_ROOT
    init_dir: Path = DEFAULT_INIT_DIR
    runlevel_dir: Path = DEFAULT_RUNLEVEL_DIR
    state_dir: Path = DEFAULT_STATE_DIR

    @field_validator("root", "init_dir", "runlevel_dir", "state_dir", mode="before")
    @classmethod
    def _reject_blank(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            msg = "path must not be empty"
            raise ValueError(msg)
        return value


class ConfigModel(BaseModel):
    """Pydantic model for the whole configuration file.

    Attributes:
        config_version: Schema version number.
        registry: Registry location settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    registry: RegistryConfigModel = Field(default_factory=RegistryConfigModel)

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def config_from_model(model: ConfigModel) -> Config:
    """Convert a validated model into the runtime ``Config`` dataclass."""
    registry = model.registry
    return Config(
        root=registry.root,
        init_dir=registry.init_dir,
        runlevel_dir=registry.runlevel_dir,
        state_dir=registry.state_dir,
    )


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "RegistryConfigModel",
    "RegistryPaths",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
