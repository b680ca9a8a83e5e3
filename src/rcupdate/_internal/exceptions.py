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

"""Common exception hierarchy for rcupdate."""

from __future__ import annotations

__all__ = [
    "CommandConflictError",
    "InvalidCommandError",
    "InvalidRunlevelError",
    "MissingCommandError",
    "MissingServiceError",
    "NoRunlevelsError",
    "RcUpdateConfigurationError",
    "RcUpdateError",
    "RcUpdateUsageError",
]


class RcUpdateError(Exception):
    """Base error for all rcupdate exceptions."""


class RcUpdateUsageError(RcUpdateError, ValueError):
    """Raised when the command line cannot be turned into a valid invocation."""


class RcUpdateConfigurationError(RcUpdateError):
    """Raised when the host configuration prevents any update from running."""


class CommandConflictError(RcUpdateUsageError):
    """Raised when more than one distinct action flag is supplied."""

    def __init__(self) -> None:
        """Initialise the error with the fixed conflict message."""
        super().__init__("cannot mix commands")


class InvalidCommandError(RcUpdateUsageError):
    """Raised when the legacy positional verb is not recognised."""

    def __init__(self, command: str) -> None:
        """Initialise the error with the rejected verb.

        Args:
            command: Positional token that did not match a known verb.
        """
        self.command = command
        super().__init__(f"invalid command `{command}`")


class MissingCommandError(RcUpdateUsageError):
    """Raised when neither an action flag nor a legacy verb was given."""

    def __init__(self) -> None:
        """Initialise the error with the fixed message."""
        super().__init__("no command specified")


class MissingServiceError(RcUpdateUsageError):
    """Raised when add or delete is requested without a service name."""

    def __init__(self) -> None:
        """Initialise the error with the fixed message."""
        super().__init__("no service specified")


class InvalidRunlevelError(RcUpdateUsageError):
    """Raised when a command-line runlevel is unknown to the registry."""

    def __init__(self, runlevel: str) -> None:
        """Initialise the error with the rejected runlevel.

        Args:
            runlevel: Runlevel token the registry does not recognise.
        """
        self.runlevel = runlevel
        super().__init__(f"`{runlevel}` is not a valid runlevel")


class NoRunlevelsError(RcUpdateConfigurationError):
    """Raised when no runlevel was given and the current one is unavailable."""

    def __init__(self) -> None:
        """Initialise the error with the fixed message."""
        super().__init__("no runlevels found")
