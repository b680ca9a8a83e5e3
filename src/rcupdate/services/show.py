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

"""Membership table for the ``show`` action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rcupdate.core.constants import SERVICE_COLUMN_WIDTH

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rcupdate.registry.base import Registry


@dataclass(slots=True, frozen=True)
class MembershipRow:
    """Membership of one service across the requested runlevels.

    Attributes:
        service: Service name.
        runlevels: Requested runlevels, in column order.
        members: One flag per runlevel, aligned with ``runlevels``.
    """

    service: str
    runlevels: tuple[str, ...]
    members: tuple[bool, ...]

    @property
    def in_any(self) -> bool:
        return any(self.members)

    def columns(self) -> list[str]:
        """Return the runlevel name where a member, else blanks of equal width."""
        return [
            runlevel if member else " " * len(runlevel)
            for runlevel, member in zip(self.runlevels, self.members, strict=True)
        ]

    def render(self) -> str:
        cells = "".join(f" {column}" for column in self.columns())
        return f" {self.service:>{SERVICE_COLUMN_WIDTH}} |{cells}"


def membership_matrix(registry: Registry, runlevels: Sequence[str]) -> list[MembershipRow]:
    """Compute membership of every known service across ``runlevels``.

    Services come from the registry in its own order, regardless of which
    runlevels were requested.
    """
    columns = tuple(runlevels)
    return [
        MembershipRow(
            service=service,
            runlevels=columns,
            members=tuple(registry.is_member(service, runlevel) for runlevel in columns),
        )
        for service in registry.list_services()
    ]


def render(registry: Registry, runlevels: Sequence[str], *, verbose: bool = False) -> list[str]:
    """Render the membership table rows for ``runlevels``.

    Args:
        registry: Registry to read from.
        runlevels: Columns, in display order.
        verbose: Include services that belong to none of the runlevels.

    Returns:
        One formatted row per included service.
    """
    return [row.render() for row in membership_matrix(registry, runlevels) if verbose or row.in_any]


__all__ = ["MembershipRow", "membership_matrix", "render"]
