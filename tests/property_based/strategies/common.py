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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

from tests.fixtures.registry import InMemoryRegistry

__all__ = [
    "names",
    "registries",
    "runlevel_selections",
]

NAME_PATTERN = r"[a-z][a-z0-9._-]{0,11}"


def names() -> st.SearchStrategy[str]:
    """Return a strategy that yields service or runlevel names."""
    return st.from_regex(NAME_PATTERN, fullmatch=True)


@st.composite
def registries(draw: st.DrawFn, min_runlevels: int = 1, max_runlevels: int = 5) -> InMemoryRegistry:
    """Strategy emitting in-memory registries with random memberships.

    Args:
        draw: Hypothesis draw callback.
        min_runlevels: Minimum number of runlevels in the registry.
        max_runlevels: Maximum number of runlevels in the registry.

    Returns:
        A fresh ``InMemoryRegistry`` whose current runlevel is one of its own.
    """
    services = draw(st.lists(names(), min_size=1, max_size=6, unique=True))
    runlevels = draw(st.lists(names(), min_size=min_runlevels, max_size=max_runlevels, unique=True))
    memberships = {
        runlevel: set(draw(st.lists(st.sampled_from(services), unique=True))) for runlevel in runlevels
    }
    current = draw(st.sampled_from(runlevels)) if runlevels else None
    return InMemoryRegistry(services=sorted(services), memberships=memberships, current=current)


@st.composite
def runlevel_selections(draw: st.DrawFn, registry: InMemoryRegistry) -> list[str]:
    """Draw an ordered, non-empty selection of the registry's runlevels."""
    return draw(st.lists(st.sampled_from(registry.list_runlevels()), min_size=1, unique=True))
