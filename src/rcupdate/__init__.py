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

"""rcupdate - manage which services belong to which runlevels.

Adds a service to one or more runlevels, removes it, or shows the
service/runlevel membership table. Membership itself is owned by a service
registry; the bundled ``FilesystemRegistry`` works on an OpenRC-style tree.
"""

from __future__ import annotations

__version__ = "0.1.0"

from rcupdate._internal.exceptions import (
    RcUpdateConfigurationError,
    RcUpdateError,
    RcUpdateUsageError,
)

from .core import Action, BatchResult, FailureKind, Invocation, Outcome, OutcomeStatus
from .registry import FilesystemRegistry, Registry, RegistryOperationError
from .services import BatchOrchestrator, render

__all__ = [
    "Action",
    "BatchOrchestrator",
    "BatchResult",
    "FailureKind",
    "FilesystemRegistry",
    "Invocation",
    "Outcome",
    "OutcomeStatus",
    "RcUpdateConfigurationError",
    "RcUpdateError",
    "RcUpdateUsageError",
    "Registry",
    "RegistryOperationError",
    "__version__",
    "render",
]
