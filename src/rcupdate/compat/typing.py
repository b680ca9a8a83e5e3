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

"""Compatibility layer for the typing features rcupdate relies on.

Names are imported from the standard library when the running interpreter
provides them, and from `typing_extensions` otherwise, so callers never write
version checks of their own.

Attributes:
    TypedDict
    Unpack
    assert_never
    override

Notes:
    - When type checking (`TYPE_CHECKING` is true), all names come from
      `typing_extensions` to give type checkers a consistent API on 3.10.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import TypedDict, Unpack, assert_never, override
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import Unpack, assert_never  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import Unpack, assert_never

__all__ = [
    "TypedDict",
    "Unpack",
    "assert_never",
    "override",
]
