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

"""Runtime tests for the ``rcupdate.compat`` helpers."""

from __future__ import annotations

import enum as _enum
import sys

import pytest

from rcupdate.compat import StrEnum, assert_never, tomllib
from rcupdate.compat import toml as compat_toml

pytestmark = pytest.mark.unit


class _Colour(StrEnum):
    RED = "red"


def test_str_enum_behaves_like_stdlib() -> None:
    assert isinstance(_Colour.RED, str)
    assert isinstance(_Colour.RED, _enum.Enum)
    assert str(_Colour.RED) == "red"
    assert _Colour("red") is _Colour.RED


def test_tomllib_parses_documents() -> None:
    assert tomllib.loads('[registry]\nroot = "/"\n') == {"registry": {"root": "/"}}
    with pytest.raises(tomllib.TOMLDecodeError):
        _ = tomllib.loads("[registry\n")


def test_toml_module_matches_interpreter() -> None:
    expected = "tomllib" if sys.version_info >= (3, 11) else "tomli"
    assert compat_toml.tomllib.__name__ == expected


def test_assert_never_raises() -> None:
    with pytest.raises(AssertionError):
        assert_never("unexpected")  # type: ignore[arg-type]
