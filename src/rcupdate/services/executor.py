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

"""Per-runlevel mutation executors.

Each executor applies one action for one service against one runlevel and
translates what the registry reports into an ``Outcome``. Every call emits
exactly one user-facing log record: info when the registry changed, warning
for a no-op, error for a failure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from rcupdate._internal.logging_utils import structured_extra
from rcupdate.compat import assert_never
from rcupdate.core.constants import APPLET
from rcupdate.core.model_types import Action, FailureKind, LogComponent
from rcupdate.core.types import Outcome
from rcupdate.registry.base import MembershipNotFoundError, RegistryOperationError

if TYPE_CHECKING:
    from rcupdate.registry.base import Registry

logger: logging.Logger = logging.getLogger("rcupdate.services")


class MutationExecutor(Protocol):
    """Apply one action to one (runlevel, service) pair."""

    action: Action

    def apply(self, runlevel: str, service: str) -> Outcome: ...


class _RegistryExecutor:
    action: Action

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def _report(self, level: int, message: str, outcome: Outcome) -> Outcome:
        logger.log(
            level,
            message,
            extra=structured_extra(
                LogComponent.SERVICES,
                action=self.action,
                service=outcome.service,
                runlevel=outcome.runlevel,
                outcome=outcome.status,
            ),
        )
        return outcome


class AddExecutor(_RegistryExecutor):
    """Create a membership unless the service is missing or already a member."""

    action = Action.ADD

    def apply(self, runlevel: str, service: str) -> Outcome:
        if not self.registry.service_exists(service):
            return self._report(
                logging.ERROR,
                f"{APPLET}: service `{service}` does not exist",
                Outcome.failed(runlevel, service, FailureKind.SERVICE_MISSING),
            )
        if self.registry.is_member(service, runlevel):
            return self._report(
                logging.WARNING,
                f"{APPLET}: {service} already installed in runlevel `{runlevel}`; skipping",
                Outcome.noop(runlevel, service),
            )
        try:
            self.registry.add_membership(runlevel, service)
        except RegistryOperationError as exc:
            return self._report(
                logging.ERROR,
                f"{APPLET}: failed to add service `{service}` to runlevel `{runlevel}`: {exc.reason}",
                Outcome.failed(runlevel, service, FailureKind.REGISTRY_ERROR, exc.reason),
            )
        return self._report(
            logging.INFO,
            f"{service} added to runlevel {runlevel}",
            Outcome.applied(runlevel, service),
        )


class DeleteExecutor(_RegistryExecutor):
    """Remove a membership, diagnosing the not-a-member case separately."""

    action = Action.DELETE

    def apply(self, runlevel: str, service: str) -> Outcome:
        try:
            self.registry.remove_membership(runlevel, service)
        except MembershipNotFoundError as exc:
            return self._report(
                logging.ERROR,
                f"{APPLET}: service `{service}` is not in runlevel `{runlevel}`",
                Outcome.failed(runlevel, service, FailureKind.NOT_A_MEMBER, exc.reason),
            )
        except RegistryOperationError as exc:
            return self._report(
                logging.ERROR,
                f"{APPLET}: failed to remove service `{service}` from runlevel `{runlevel}`: {exc.reason}",
                Outcome.failed(runlevel, service, FailureKind.REGISTRY_ERROR, exc.reason),
            )
        return self._report(
            logging.INFO,
            f"{service} removed from runlevel {runlevel}",
            Outcome.applied(runlevel, service),
        )


def executor_for(action: Action, registry: Registry) -> MutationExecutor:
    """Return the executor implementing ``action``.

    Args:
        action: Add or delete.
        registry: Registry the executor mutates.

    Returns:
        The matching executor.

    Raises:
        ValueError: If ``action`` is ``show``, which never mutates.
    """
    match action:
        case Action.ADD:
            return AddExecutor(registry)
        case Action.DELETE:
            return DeleteExecutor(registry)
        case Action.SHOW:
            msg = "show does not mutate the registry"
            raise ValueError(msg)
        case _:
            assert_never(action)


__all__ = ["AddExecutor", "DeleteExecutor", "MutationExecutor", "executor_for"]
