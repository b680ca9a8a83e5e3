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

"""Service layer: mutation executors, batch orchestration and the show table."""

from __future__ import annotations

from .batch import BatchOrchestrator
from .executor import AddExecutor, DeleteExecutor, MutationExecutor, executor_for
from .show import MembershipRow, membership_matrix, render

__all__ = [
    "AddExecutor",
    "BatchOrchestrator",
    "DeleteExecutor",
    "MembershipRow",
    "MutationExecutor",
    "executor_for",
    "membership_matrix",
    "render",
]
