from __future__ import annotations

import nox

PYTHON_VERSIONS = ["3.10", "3.11", "3.12"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", *session.posargs)


@nox.session(python="3.12")
def properties(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "-m", "property", "--hypothesis-show-statistics", *session.posargs)


@nox.session(python=False)
def mypy(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("mypy", "src/rcupdate", *session.posargs)


@nox.session(python=False)
def pyright(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("pyright", *session.posargs)
