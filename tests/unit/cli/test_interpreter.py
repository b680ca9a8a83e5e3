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

"""Unit tests for the command interpreter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rcupdate._internal.exceptions import (
    CommandConflictError,
    InvalidCommandError,
    InvalidRunlevelError,
    MissingCommandError,
    MissingServiceError,
    RcUpdateUsageError,
)
from rcupdate.cli.interpreter import interpret, resolve_action
from rcupdate.core.model_types import Action
from rcupdate.core.types import Invocation

if TYPE_CHECKING:
    from tests.fixtures.registry import InMemoryRegistry

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.mark.parametrize(
    ("verb", "expected"),
    [("add", Action.ADD), ("delete", Action.DELETE), ("del", Action.DELETE), ("show", Action.SHOW)],
)
def test_legacy_verbs_are_consumed(verb: str, expected: Action) -> None:
    action, remaining = resolve_action([], [verb, "sshd", "boot"])
    assert action is expected
    assert remaining == ["sshd", "boot"]


def test_flag_wins_over_positional_verb() -> None:
    action, remaining = resolve_action([Action.ADD], ["show", "boot"])
    assert action is Action.ADD
    assert remaining == ["show", "boot"]


def test_repeated_flag_is_not_a_conflict() -> None:
    action, _ = resolve_action([Action.DELETE, Action.DELETE], ["sshd"])
    assert action is Action.DELETE


@pytest.mark.parametrize(
    "flags",
    [[Action.ADD, Action.DELETE], [Action.SHOW, Action.ADD], [Action.DELETE, Action.SHOW, Action.DELETE]],
)
def test_mixed_flags_conflict(flags: list[Action]) -> None:
    with pytest.raises(CommandConflictError, match="cannot mix commands"):
        _ = resolve_action(flags, ["sshd"])


def test_unknown_verb_is_rejected() -> None:
    with pytest.raises(InvalidCommandError, match="invalid command `enable`") as excinfo:
        _ = resolve_action([], ["enable", "sshd"])
    assert excinfo.value.command == "enable"


def test_no_verb_and_no_flag() -> None:
    with pytest.raises(MissingCommandError):
        _ = resolve_action([], [])


def test_add_resolves_service_and_runlevels(registry: InMemoryRegistry) -> None:
    invocation = interpret([], ["add", "sshd", "default", "boot"], registry)
    assert invocation == Invocation(Action.ADD, "sshd", ("default", "boot"))


def test_add_without_runlevels_defers_to_orchestrator(registry: InMemoryRegistry) -> None:
    invocation = interpret([Action.ADD], ["sshd"], registry)
    assert invocation.runlevels == ()


def test_delete_requires_service(registry: InMemoryRegistry) -> None:
    with pytest.raises(MissingServiceError, match="no service specified"):
        _ = interpret([], ["delete"], registry)


def test_first_invalid_runlevel_aborts_before_mutation(registry: InMemoryRegistry) -> None:
    with pytest.raises(InvalidRunlevelError, match="`bogus` is not a valid runlevel") as excinfo:
        _ = interpret([], ["add", "sshd", "default", "bogus", "worse"], registry)
    assert excinfo.value.runlevel == "bogus"
    assert registry.calls == []


def test_show_without_arguments_uses_every_runlevel(registry: InMemoryRegistry) -> None:
    invocation = interpret([Action.SHOW], [], registry)
    assert invocation == Invocation(Action.SHOW, None, ("default", "boot"))


def test_show_treats_lone_positional_as_runlevel(registry: InMemoryRegistry) -> None:
    invocation = interpret([], ["show", "boot"], registry)
    assert invocation.service is None
    assert invocation.runlevels == ("boot",)


def test_show_appends_service_slot_after_other_filters(registry: InMemoryRegistry) -> None:
    invocation = interpret([], ["show", "boot", "default"], registry)
    assert invocation.runlevels == ("default", "boot")


def test_show_service_slot_is_not_validated(registry: InMemoryRegistry) -> None:
    invocation = interpret([], ["show", "sshd"], registry)
    assert invocation.runlevels == ("sshd",)


def test_show_rejects_unknown_extra_filter(registry: InMemoryRegistry) -> None:
    with pytest.raises(InvalidRunlevelError, match="`bogus` is not a valid runlevel"):
        _ = interpret([], ["show", "boot", "bogus"], registry)


def test_verbose_is_carried_into_invocation(registry: InMemoryRegistry) -> None:
    invocation = interpret([Action.SHOW], [], registry, verbose=True)
    assert invocation.verbose is True


def test_usage_errors_share_a_base_class() -> None:
    for error in (CommandConflictError(), MissingCommandError(), MissingServiceError()):
        assert isinstance(error, RcUpdateUsageError)
