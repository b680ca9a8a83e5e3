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

"""Environment-sourced settings for rcupdate."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_ENV: Final[str] = "RCUPDATE_CONFIG"
ROOT_ENV: Final[str] = "RCUPDATE_ROOT"
VERBOSE_ENV: Final[str] = "EINFO_VERBOSE"

YES_VALUES: Final[frozenset[str]] = frozenset({"yes", "y", "true", "on", "1"})


def parse_yesno(value: str | None) -> bool:
    """Interpret an environment toggle with yes/no semantics.

    Args:
        value: Raw variable value, or ``None`` when unset.

    Returns:
        ``True`` for yes/y/true/on/1 (any case); ``False`` otherwise.
    """
    if value is None:
        return False
    return value.strip().lower() in YES_VALUES


@dataclass(slots=True, frozen=True)
class EnvOverrides:
    """Settings read once from the process environment."""

    config_path: Path | None = None
    root: Path | None = None
    verbose: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> EnvOverrides:
        """Create overrides from environment variables.

        Args:
            environ: Optional mapping to read from. Defaults to ``os.environ``.

        Returns:
            EnvOverrides: Parsed environment overrides.
        """
        env = os.environ if environ is None else environ
        return cls(
            config_path=_path_from_env(env, CONFIG_ENV),
            root=_path_from_env(env, ROOT_ENV),
            verbose=parse_yesno(env.get(VERBOSE_ENV)),
        )


def _path_from_env(environ: Mapping[str, str], name: str) -> Path | None:
    raw = environ.get(name)
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    return Path(value)


__all__ = ["CONFIG_ENV", "ROOT_ENV", "VERBOSE_ENV", "EnvOverrides", "parse_yesno"]
