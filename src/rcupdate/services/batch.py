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

"""Batch orchestration of add/delete across a runlevel set."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from rcupdate._internal.exceptions import NoRunlevelsError
from rcupdate._internal.logging_utils import structured_extra
from rcupdate.core.constants import APPLET
from rcupdate.core.model_types import Action, LogComponent
from rcupdate.core.types import BatchResult

from .executor import executor_for

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rcupdate.core.types import Outcome
    from rcupdate.registry.base import Registry

logger: logging.Logger = logging.getLogger("rcupdate.services")


class BatchOrchestrator:
    """Run one action for one service across an ordered runlevel set."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def resolve_runlevels(self, runlevels: Sequence[str]) -> tuple[str, ...]:
        """Return the runlevels to process, defaulting to the current one.

        Raises:
            NoRunlevelsError: If none were given and the registry cannot
                report a current runlevel.
        """
        if runlevels:
            return tuple(runlevels)
        current = self.registry.current_runlevel()
        if not current:
            raise NoRunlevelsError
        logger.debug(
            "No runlevel given; using current runlevel %s",
            current,
            extra=structured_extra(LogComponent.SERVICES, runlevel=current),
        )
        return (current,)

    def run(self, action: Action, service: str, runlevels: Sequence[str]) -> BatchResult:
        """Apply ``action`` for ``service`` to every runlevel in order.

        Runlevels the registry does not recognise are reported and skipped;
        the remaining runlevels are still processed. The batch fails iff at
        least one outcome failed.

        Args:
            action: Add or delete.
            service: Target service name.
            runlevels: Ordered runlevel set; empty means the current runlevel.

        Returns:
            BatchResult aggregating every outcome.

        Raises:
            NoRunlevelsError: If no runlevel can be determined.
        """
        executor = executor_for(action, self.registry)
        targets = self.resolve_runlevels(runlevels)
        outcomes: list[Outcome] = []
        skipped: list[str] = []
        for runlevel in targets:
            if not self.registry.runlevel_exists(runlevel):
                logger.error(
                    "%s: runlevel `%s` does not exist",
                    APPLET,
                    runlevel,
                    extra=structured_extra(LogComponent.SERVICES, action=action, service=service, runlevel=runlevel),
                )
                skipped.append(runlevel)
                continue
            outcomes.append(executor.apply(runlevel, service))

        result = BatchResult(action=action, service=service, outcomes=tuple(outcomes), skipped=tuple(skipped))
        if action is Action.DELETE and not result.failed and result.applied_count == 0:
            advisory = f"{APPLET}: service `{service}` not found in any of the specified runlevels"
            logger.warning(
                advisory,
                extra=structured_extra(LogComponent.SERVICES, action=action, service=service),
            )
            result = replace(result, advisory=advisory)
        return result


__all__ = ["BatchOrchestrator"]
