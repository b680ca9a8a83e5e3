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

"""Stable error code registry used across rcupdate."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from rcupdate.config.models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)
from rcupdate.registry.base import MembershipNotFoundError, RegistryError, RegistryOperationError

from .exceptions import (
    CommandConflictError,
    InvalidCommandError,
    InvalidRunlevelError,
    MissingCommandError,
    MissingServiceError,
    NoRunlevelsError,
    RcUpdateConfigurationError,
    RcUpdateError,
    RcUpdateUsageError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    RcUpdateError: ErrorCode("RU000"),
    RcUpdateUsageError: ErrorCode("RU100"),
    CommandConflictError: ErrorCode("RU101"),
    InvalidCommandError: ErrorCode("RU102"),
    MissingCommandError: ErrorCode("RU103"),
    MissingServiceError: ErrorCode("RU104"),
    InvalidRunlevelError: ErrorCode("RU105"),
    RcUpdateConfigurationError: ErrorCode("RU200"),
    NoRunlevelsError: ErrorCode("RU201"),
    ConfigValidationError: ErrorCode("RU210"),
    ConfigReadError: ErrorCode("RU211"),
    InvalidConfigFileError: ErrorCode("RU212"),
    UnsupportedConfigVersionError: ErrorCode("RU213"),
    RegistryError: ErrorCode("RU300"),
    RegistryOperationError: ErrorCode("RU301"),
    MembershipNotFoundError: ErrorCode("RU302"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured rcupdate exception.

    Args:
        exc: Exception instance raised by rcupdate code paths.

    Returns:
        Error code mapped from the exception's class hierarchy.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("RU000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Returns:
        Mapping of ``<module>.<ExceptionName>`` strings to error codes.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
