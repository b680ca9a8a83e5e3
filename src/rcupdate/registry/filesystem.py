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

"""OpenRC-style registry backed by the filesystem.

Layout under the configured directories:

- ``init_dir/<service>``: one executable script per service.
- ``runlevel_dir/<runlevel>/``: one directory per runlevel.
- ``runlevel_dir/<runlevel>/<service>``: a symlink to the service script,
  recording membership.
- ``state_dir/softlevel``: name of the runlevel the system is in.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from rcupdate._internal.logging_utils import structured_extra
from rcupdate.core.model_types import LogComponent

from .base import MembershipNotFoundError, RegistryError, RegistryOperationError

if TYPE_CHECKING:
    from pathlib import Path

    from rcupdate.config.models import RegistryPaths

logger: logging.Logger = logging.getLogger("rcupdate.registry")


def _is_plain_name(name: str) -> bool:
    return bool(name) and "/" not in name and name not in {".", ".."}


def _strerror(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _read_error(path: Path, exc: OSError | UnicodeDecodeError) -> RegistryError:
    reason = _strerror(exc) if isinstance(exc, OSError) else "invalid UTF-8 content"
    return RegistryError(f"unable to read {path}: {reason}")


class FilesystemRegistry:
    """Registry implementation over an OpenRC directory tree."""

    def __init__(self, paths: RegistryPaths) -> None:
        self.paths = paths

    def _script(self, service: str) -> Path:
        return self.paths.init_dir / service

    def _runlevel(self, runlevel: str) -> Path:
        return self.paths.runlevel_dir / runlevel

    def service_exists(self, name: str) -> bool:
        if not _is_plain_name(name):
            return False
        script = self._script(name)
        return script.is_file() and os.access(script, os.X_OK)

    def is_member(self, service: str, runlevel: str) -> bool:
        if not (_is_plain_name(service) and _is_plain_name(runlevel)):
            return False
        return (self._runlevel(runlevel) / service).is_symlink()

    def add_membership(self, runlevel: str, service: str) -> None:
        link = self._runlevel(runlevel) / service
        target = self.paths.link_target(service)
        try:
            os.symlink(target, link)
        except OSError as exc:
            raise RegistryOperationError(_strerror(exc)) from exc
        logger.debug(
            "Linked %s -> %s",
            link,
            target,
            extra=structured_extra(LogComponent.REGISTRY, service=service, runlevel=runlevel, path=link),
        )

    def remove_membership(self, runlevel: str, service: str) -> None:
        if not (_is_plain_name(service) and _is_plain_name(runlevel)):
            raise MembershipNotFoundError(runlevel, service)
        link = self._runlevel(runlevel) / service
        if not link.is_symlink():
            raise MembershipNotFoundError(runlevel, service)
        try:
            link.unlink()
        except FileNotFoundError as exc:
            raise MembershipNotFoundError(runlevel, service, _strerror(exc)) from exc
        except OSError as exc:
            raise RegistryOperationError(_strerror(exc)) from exc
        logger.debug(
            "Unlinked %s",
            link,
            extra=structured_extra(LogComponent.REGISTRY, service=service, runlevel=runlevel, path=link),
        )

    def _entries(self, directory: Path) -> list[Path]:
        try:
            return list(directory.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise _read_error(directory, exc) from exc

    def list_services(self) -> list[str]:
        """Return every service script name, sorted, hidden entries skipped."""
        entries = self._entries(self.paths.init_dir)
        return sorted(
            entry.name
            for entry in entries
            if not entry.name.startswith(".") and entry.is_file() and os.access(entry, os.X_OK)
        )

    def list_runlevels(self) -> list[str]:
        """Return every runlevel directory name, sorted."""
        entries = self._entries(self.paths.runlevel_dir)
        return sorted(entry.name for entry in entries if not entry.name.startswith(".") and entry.is_dir())

    def runlevel_exists(self, name: str) -> bool:
        return _is_plain_name(name) and self._runlevel(name).is_dir()

    def current_runlevel(self) -> str | None:
        """Return the runlevel recorded in the softlevel file, if any.

        Raises:
            RegistryError: If the file exists but cannot be read or decoded.
        """
        path = self.paths.softlevel_path
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise _read_error(path, exc) from exc
        lines = content.strip().splitlines()
        if not lines:
            return None
        return lines[0].strip() or None


__all__ = ["FilesystemRegistry"]
