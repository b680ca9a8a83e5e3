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

"""Model types and enumerations for rcupdate.

This module defines the enumerations shared across rcupdate:

- The action requested for one invocation
- Per-runlevel outcome statuses and failure kinds
- Logging formats and components
"""

from __future__ import annotations

from typing import Final

from rcupdate.compat import StrEnum


class Action(StrEnum):
    """Action requested for one invocation.

    Attributes:
        ADD: Add the service to every target runlevel.
        DELETE: Remove the service from every target runlevel.
        SHOW: Render the service/runlevel membership table.
    """

    ADD = "add"
    DELETE = "delete"
    SHOW = "show"

    @classmethod
    def from_verb(cls, raw: str) -> Action | None:
        """Resolve a legacy positional verb to an action.

        Matching is exact, as the legacy command line never accepted other
        spellings.

        Args:
            raw: Positional token supplied on the command line.

        Returns:
            The matching action, or ``None`` when the token is not a verb.
        """
        return LEGACY_VERBS.get(raw)


LEGACY_VERBS: Final[dict[str, Action]] = {
    "add": Action.ADD,
    "delete": Action.DELETE,
    "del": Action.DELETE,
    "show": Action.SHOW,
}


class OutcomeStatus(StrEnum):
    """Result of applying one action to one runlevel.

    Attributes:
        APPLIED: The registry changed.
        NOOP: Nothing needed to change; reported as a warning.
        FAILED: The mutation was refused or failed.
    """

    APPLIED = "applied"
    NOOP = "noop"
    FAILED = "failed"


class FailureKind(StrEnum):
    """Diagnosis attached to a failed outcome."""

    SERVICE_MISSING = "service_missing"
    NOT_A_MEMBER = "not_a_member"
    REGISTRY_ERROR = "registry_error"


class LogFormat(StrEnum):
    """Output format for log records."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Logical component attached to structured log records."""

    CLI = "cli"
    SERVICES = "services"
    REGISTRY = "registry"
    CONFIG = "config"


__all__ = [
    "LEGACY_VERBS",
    "Action",
    "FailureKind",
    "LogComponent",
    "LogFormat",
    "OutcomeStatus",
]
