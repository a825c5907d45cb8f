"""Terminal output helpers for e2e test runs.

Progress and warnings go to stdout with ANSI colours, the same channel
test runners capture. Colours are dropped when ``NO_COLOR`` is set.
"""

from __future__ import annotations

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    ENDC = '\033[0m'


def _paint(color: str, msg: str) -> str:
    if os.environ.get("NO_COLOR"):
        return msg
    return f"{color}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message (one per test step, like ``By(...)``)."""
    print(_paint(Colors.HEADER + Colors.BOLD, msg))


def print_command(cmd: list[str], cwd: str | None = None) -> None:
    """Echo an external command before it runs."""
    where = f" (in {cwd})" if cwd else ""
    print(_paint(Colors.DIM, f"running: {' '.join(cmd)}{where}"))


def print_success(msg: str) -> None:
    print(_paint(Colors.GREEN, f"✓ {msg}"))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(Colors.YELLOW, f"warning: {msg}"))


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(_paint(Colors.RED, f"❌ {msg}"), file=sys.stderr)


def wrap_warn_output(_output: str, err: BaseException | None) -> None:
    """Report ``err`` as a warning instead of failing the test.

    Intended for teardown steps whose failure should not abort the run.
    """
    if err is not None:
        print_warning(str(err))


def wrap_warn(err: BaseException | None) -> None:
    wrap_warn_output("", err)
