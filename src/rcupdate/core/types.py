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

"""Value types passed between the interpreter, orchestrator and renderer."""

from __future__ import annotations

from dataclasses import dataclass

from .model_types import Action, FailureKind, OutcomeStatus


@dataclass(slots=True, frozen=True)
class Outcome:
    """Result of applying one action for one service against one runlevel.

    Attributes:
        status: Applied, no-op or failed.
        runlevel: Runlevel the action targeted.
        service: Service the action targeted.
        failure: Diagnosis for failed outcomes, ``None`` otherwise.
        reason: Underlying registry error text, when one was reported.
    """

    status: OutcomeStatus
    runlevel: str
    service: str
    failure: FailureKind | None = None
    reason: str | None = None

    @classmethod
    def applied(cls, runlevel: str, service: str) -> Outcome:
        return cls(OutcomeStatus.APPLIED, runlevel, service)

    @classmethod
    def noop(cls, runlevel: str, service: str) -> Outcome:
        return cls(OutcomeStatus.NOOP, runlevel, service)

    @classmethod
    def failed(
        cls,
        runlevel: str,
        service: str,
        failure: FailureKind,
        reason: str | None = None,
    ) -> Outcome:
        return cls(OutcomeStatus.FAILED, runlevel, service, failure, reason)

    @property
    def is_failure(self) -> bool:
        return self.status is OutcomeStatus.FAILED


@dataclass(slots=True, frozen=True)
class Invocation:
    """Immutable description of one command-line invocation.

    Built once by the command interpreter and handed to the orchestrator or
    the table renderer.

    Attributes:
        action: The single action requested.
        service: Target service for add/delete; ``None`` for show.
        runlevels: Ordered runlevel set. Empty means "use the default".
        verbose: Include non-member rows in the show table.
    """

    action: Action
    service: str | None
    runlevels: tuple[str, ...] = ()
    verbose: bool = False


@dataclass(slots=True, frozen=True)
class BatchResult:
    """Aggregate of one add/delete batch.

    Attributes:
        action: Action applied by the batch.
        service: Service the batch targeted.
        outcomes: Per-runlevel outcomes in processing order.
        skipped: Runlevels rejected by the registry at apply time.
        advisory: Warning emitted when a delete changed nothing.
    """

    action: Action
    service: str
    outcomes: tuple[Outcome, ...] = ()
    skipped: tuple[str, ...] = ()
    advisory: str | None = None

    @property
    def applied_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.APPLIED)

    @property
    def failed(self) -> bool:
        return any(outcome.is_failure for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


__all__ = ["BatchResult", "Invocation", "Outcome"]
