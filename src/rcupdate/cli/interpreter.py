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

"""Turn parsed command-line tokens into an immutable ``Invocation``.

The action comes from explicit flags when present. Otherwise the first
positional argument is read as a legacy verb (``add``, ``delete``/``del``,
``show``). The next positional is the service, and every remaining one must
name a runlevel the registry knows. Validation is complete before any
mutation runs, so a bad command line never changes the registry.

In show mode the service slot is read as one more runlevel filter, which keeps
``rc-update show boot`` working as it always has. It is appended after the
other filters and is not validated, so an unknown name yields an empty column.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rcupdate._internal.exceptions import (
    CommandConflictError,
    InvalidCommandError,
    InvalidRunlevelError,
    MissingCommandError,
    MissingServiceError,
)
from rcupdate.compat import assert_never
from rcupdate.core.model_types import Action
from rcupdate.core.types import Invocation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rcupdate.registry.base import Registry


def resolve_action(flag_actions: Sequence[Action], positionals: Sequence[str]) -> tuple[Action, list[str]]:
    """Resolve the single action and return it with the unconsumed positionals.

    Args:
        flag_actions: Actions collected from ``-a``/``-d``/``-s`` in order.
        positionals: Non-option arguments in order.

    Returns:
        The action and the positionals left after any legacy verb.

    Raises:
        CommandConflictError: If more than one distinct action flag was given.
        InvalidCommandError: If the legacy verb is not recognised.
        MissingCommandError: If there is neither a flag nor a verb.
    """
    distinct = list(dict.fromkeys(flag_actions))
    if len(distinct) > 1:
        raise CommandConflictError
    if distinct:
        return distinct[0], list(positionals)
    if not positionals:
        raise MissingCommandError
    verb = positionals[0]
    action = Action.from_verb(verb)
    if action is None:
        raise InvalidCommandError(verb)
    return action, list(positionals[1:])


def _require_runlevels(registry: Registry, names: Sequence[str]) -> tuple[str, ...]:
    for name in names:
        if not registry.runlevel_exists(name):
            raise InvalidRunlevelError(name)
    return tuple(names)


def interpret(
    flag_actions: Sequence[Action],
    positionals: Sequence[str],
    registry: Registry,
    *,
    verbose: bool = False,
) -> Invocation:
    """Build the invocation for one run of the tool.

    Args:
        flag_actions: Actions collected from explicit flags, in order.
        positionals: Non-option arguments, in order.
        registry: Registry used to validate runlevel names.
        verbose: Show-mode toggle taken from the environment.

    Returns:
        The immutable invocation.

    Raises:
        RcUpdateUsageError: If the command line is invalid. Raised before
            anything is mutated.
    """
    action, remaining = resolve_action(flag_actions, positionals)
    service = remaining[0] if remaining else None
    extras = remaining[1:]

    match action:
        case Action.SHOW:
            filters = _require_runlevels(registry, extras)
            if service is not None:
                filters = (*filters, service)
            runlevels = filters or tuple(registry.list_runlevels())
            return Invocation(action=action, service=None, runlevels=runlevels, verbose=verbose)
        case Action.ADD | Action.DELETE:
            if service is None:
                raise MissingServiceError
            runlevels = _require_runlevels(registry, extras)
            return Invocation(action=action, service=service, runlevels=runlevels, verbose=verbose)
        case _:
            assert_never(action)


__all__ = ["interpret", "resolve_action"]
