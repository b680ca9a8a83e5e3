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

"""Registry contract required by the rcupdate orchestrator.

The registry is the component of record for services, runlevels and their
memberships. rcupdate never touches membership state directly: it asks the
registry to mutate and interprets the result. Mutations signal failure by
raising ``RegistryOperationError``; a removal of an absent membership raises
the narrower ``MembershipNotFoundError``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rcupdate._internal.exceptions import RcUpdateError


class RegistryError(RcUpdateError):
    """Base error for failures reported by a registry."""


class RegistryOperationError(RegistryError):
    """Raised when a registry mutation fails.

    Attributes:
        reason: Underlying system error text, reported verbatim to the user.
    """

    def __init__(self, reason: str) -> None:
        """Initialise the error with the underlying reason.

        Args:
            reason: Human-readable cause, typically ``os.strerror`` output.
        """
        self.reason = reason
        super().__init__(reason)


class MembershipNotFoundError(RegistryOperationError):
    """Raised when removing a membership that does not exist."""

    def __init__(self, runlevel: str, service: str, reason: str = "No such file or directory") -> None:
        """Initialise the error with the missing membership.

        Args:
            runlevel: Runlevel the removal targeted.
            service: Service the removal targeted.
            reason: Underlying system error text.
        """
        self.runlevel = runlevel
        self.service = service
        super().__init__(reason)


@runtime_checkable
class Registry(Protocol):
    """Operations rcupdate requires from a service registry."""

    def service_exists(self, name: str) -> bool: ...

    def is_member(self, service: str, runlevel: str) -> bool: ...

    def add_membership(self, runlevel: str, service: str) -> None: ...

    def remove_membership(self, runlevel: str, service: str) -> None: ...

    def list_services(self) -> list[str]: ...

    def list_runlevels(self) -> list[str]: ...

    def runlevel_exists(self, name: str) -> bool: ...

    def current_runlevel(self) -> str | None: ...


__all__ = [
    "MembershipNotFoundError",
    "Registry",
    "RegistryError",
    "RegistryOperationError",
]
