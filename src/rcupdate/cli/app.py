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

"""CLI entry point for ``rc-update``."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Sequence
from contextlib import suppress
from typing import Final, cast

from rcupdate import __version__
from rcupdate._internal.error_codes import error_code_for
from rcupdate._internal.exceptions import MissingCommandError, RcUpdateError
from rcupdate._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from rcupdate.compat import assert_never
from rcupdate.core.constants import APPLET
from rcupdate.core.model_types import Action, LogComponent
from rcupdate.registry import FilesystemRegistry
from rcupdate.services import BatchOrchestrator, render

from .helpers import build_cli_context, echo, register_argument
from .interpreter import interpret

logger: logging.Logger = logging.getLogger("rcupdate.cli")

RCUPDATE_VERSION: Final[str] = __version__


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the rc-update command line.

    Args:
        argv: Command-line arguments to parse. If None, uses ``sys.argv``.

    Returns:
        int: 0 on success; 1 when any runlevel update failed or the command
            line or configuration was rejected.
    """
    parser = _build_parser()
    args = parser.parse_intermixed_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"{APPLET} {RCUPDATE_VERSION}")
        return 0
    _initialize_logging(args.log_format, _select_log_level(args))
    try:
        context = build_cli_context(config_path=args.config, root=args.root)
        registry = FilesystemRegistry(context.registry_paths)
        invocation = interpret(
            args.actions or (),
            args.arguments,
            registry,
            verbose=context.env.verbose,
        )
        match invocation.action:
            case Action.SHOW:
                for line in render(registry, invocation.runlevels, verbose=invocation.verbose):
                    echo(line)
                return 0
            case Action.ADD | Action.DELETE:
                service = cast("str", invocation.service)
                result = BatchOrchestrator(registry).run(invocation.action, service, invocation.runlevels)
                logger.debug(
                    "Batch finished: %d applied, %d skipped",
                    result.applied_count,
                    len(result.skipped),
                    extra=structured_extra(
                        LogComponent.CLI,
                        action=result.action,
                        service=result.service,
                        exit_code=result.exit_code,
                    ),
                )
                return result.exit_code
            case _:
                assert_never(invocation.action)
    except MissingCommandError:
        echo(parser.format_help(), newline=False, err=True)
        return 1
    except RcUpdateError as exc:
        return _report_fatal(exc)


def _report_fatal(exc: RcUpdateError) -> int:
    logger.error(
        "%s: %s",
        APPLET,
        exc,
        extra=structured_extra(LogComponent.CLI, error_code=error_code_for(exc), exit_code=1),
    )
    return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``rc-update``.

    Returns:
        argparse.ArgumentParser: Parser accepting the action flags, the common
            options and the ``[verb] <service> [runlevel ...]`` positionals.
    """
    parser = argparse.ArgumentParser(
        prog=APPLET,
        description="Add services to runlevels, remove them, or show runlevel membership.",
        epilog="Legacy form: rc-update add|delete|del|show <service> [runlevel ...]",
    )
    actions = parser.add_argument_group("actions")
    register_argument(
        actions,
        "-a",
        "--add",
        dest="actions",
        action="append_const",
        const=Action.ADD,
        help="Add the service to the runlevels.",
    )
    register_argument(
        actions,
        "-d",
        "--delete",
        dest="actions",
        action="append_const",
        const=Action.DELETE,
        help="Delete the service from the runlevels.",
    )
    register_argument(
        actions,
        "-s",
        "--show",
        dest="actions",
        action="append_const",
        const=Action.SHOW,
        help="Show which services are in which runlevels.",
    )
    register_argument(
        parser,
        "arguments",
        nargs="*",
        metavar="ARG",
        help="[add|delete|del|show] <service> [runlevel ...]",
    )
    verbosity = parser.add_mutually_exclusive_group()
    register_argument(
        verbosity,
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug detail.",
    )
    register_argument(
        verbosity,
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events; overrides --verbose/--quiet.",
    )
    register_argument(
        parser,
        "--config",
        type=pathlib.Path,
        default=None,
        help="Read settings from this TOML file instead of /etc/rc-update.toml.",
    )
    register_argument(
        parser,
        "--root",
        type=pathlib.Path,
        default=None,
        help="Operate on the system tree under this directory.",
    )
    register_argument(
        parser,
        "-V",
        "--version",
        action="store_true",
        help="Print the rc-update version and exit.",
    )
    return parser


def _select_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level is not None:
        return str(args.log_level)
    if args.verbose:
        return "debug"
    if args.quiet:
        return "error"
    return None


def _initialize_logging(log_format: str | None, log_level: str | None) -> None:
    """Initialise logging; failures are suppressed (best-effort)."""
    with suppress(ValueError):
        _ = configure_logging(log_format, log_level=log_level)


__all__ = ["main"]
