"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary project directory, so tests
never pollute each other or the real workspace.

Tests invoke the real ``e2e-testutils`` console script in a subprocess,
exactly as an e2e suite or a developer would. This validates the full
chain: entry point → click dispatch → patch operation → file on disk.

**Isolation:** If the ``e2e-testutils`` entry point is not installed
(e.g. the package was not installed with ``pip install -e .``), every
test that depends on ``run_cli`` is automatically skipped.
"""

import os
import shutil
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Type alias for the callable fixture.
RunCli = Callable[..., subprocess.CompletedProcess[str]]

# ---------------------------------------------------------------------------
# Pre-flight checks (evaluated once at import time)
# ---------------------------------------------------------------------------

_CLI_AVAILABLE = shutil.which("e2e-testutils") is not None

_SKIP_REASON_CLI = "e2e-testutils entry point is not installed (run: pip install -e .)"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated scaffolded-project directory and cd into it.

    Yields:
        Path to the temporary project root, holding a minimal PROJECT file.
    """
    (tmp_path / "PROJECT").write_text(
        "domain: example.com\n"
        "layout: go.kubebuilder.io/v3\n"
        "projectName: memcached-operator\n"
    )
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_cli(isolated_project: Path) -> RunCli:
    """Return a helper that invokes ``e2e-testutils <args>`` in a subprocess.

    Usage in tests::

        def test_prepend(run_cli: RunCli) -> None:
            result = run_cli("prepend", "PROJECT", "multigroup: true")
            assert result.returncode == 0

    Returns:
        A callable ``(*args) -> CompletedProcess[str]``.
    """
    if not _CLI_AVAILABLE:
        pytest.skip(_SKIP_REASON_CLI)

    env = {**os.environ, "NO_COLOR": "1"}

    def _run(*args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            ["e2e-testutils", *args],
            cwd=isolated_project,
            capture_output=True,
            text=True,
            env=env,
            check=False,
        )

    return _run
