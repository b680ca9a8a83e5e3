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

"""Unit tests for the membership table renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rcupdate.services.show import MembershipRow, membership_matrix, render

if TYPE_CHECKING:
    from tests.fixtures.registry import InMemoryRegistry

pytestmark = pytest.mark.unit


def test_render_aligns_member_and_blank_columns(registry: InMemoryRegistry) -> None:
    rows = render(registry, ["default", "boot"])

    assert rows == [
        f" {'cron':>20} | default     ",
        f" {'net.lo':>20} |         boot",
        f" {'sshd':>20} |         boot",
    ]


def test_render_omits_services_in_no_requested_runlevel(registry: InMemoryRegistry) -> None:
    rows = render(registry, ["default"])

    assert rows == [f" {'cron':>20} | default"]


def test_render_verbose_keeps_blank_rows(registry: InMemoryRegistry) -> None:
    registry.services.append("ntpd")

    rows = render(registry, ["default", "boot"], verbose=True)

    assert rows[-1] == f" {'ntpd':>20} |" + " " + " " * len("default") + " " + " " * len("boot")
    assert len(rows) == 4


def test_render_follows_registry_service_order(registry: InMemoryRegistry) -> None:
    registry.services = ["sshd", "cron", "net.lo"]

    rows = render(registry, ["default", "boot"])

    assert [row.split("|")[0].strip() for row in rows] == ["sshd", "cron", "net.lo"]


def test_long_service_names_are_not_truncated(registry: InMemoryRegistry) -> None:
    name = "a-really-long-service-name"
    registry.services.append(name)
    registry.memberships["default"].add(name)

    rows = render(registry, ["default"])

    assert rows[-1] == f" {name} | default"


def test_membership_matrix_flags(registry: InMemoryRegistry) -> None:
    matrix = membership_matrix(registry, ["boot", "default"])

    assert matrix[0] == MembershipRow("cron", ("boot", "default"), (False, True))
    assert matrix[2].in_any
    assert matrix[2].columns() == ["boot", "       "]


def test_render_does_not_mutate(registry: InMemoryRegistry) -> None:
    before = registry.snapshot()
    _ = render(registry, ["default", "boot"], verbose=True)
    assert registry.snapshot() == before
    assert registry.calls == []
