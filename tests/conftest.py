"""Shared fixtures for the unit test suite.

Provides a ``make_file`` factory for scaffolded-file fixtures, a scripted
``fake_runner`` and a ``tc`` test context wired to it, so cluster commands
can be exercised without kubectl, kind or docker installed.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from e2e_testutils.core.command_runner import Kubectl
from e2e_testutils.core.test_context import TestContext
from e2e_testutils.helpers.settings import Settings
from tests._fake_runner import FakeRunner

MakeFile = Callable[..., Path]


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep captured output free of ANSI codes."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture()
def make_file(tmp_path: Path) -> MakeFile:
    """Return a helper that writes ``content`` to ``tmp_path/name``.

    Usage::

        path = make_file("Makefile", "all: build\\n", mode=0o755)
    """

    def _make(name: str, content: str, mode: int = 0o644) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        os.chmod(path, mode)
        return path

    return _make


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def tc(tmp_path: Path, fake_runner: FakeRunner) -> TestContext:
    """A context for ``tmp_path/memcached-operator`` driven by ``fake_runner``.

    Neither prerequisite is flagged as suite-managed until
    ``install_prerequisites`` installs it.
    """
    project = tmp_path / "memcached-operator"
    project.mkdir()
    settings = Settings()
    return TestContext(
        binary_name="operator-sdk",
        dir=project,
        runner=fake_runner,
        kubectl=Kubectl(fake_runner, namespace="e2e-abcd-system"),
        project_name="memcached-operator",
        image_name=settings.image_name("memcached-operator"),
        bundle_image_name=settings.bundle_image_name("memcached-operator"),
        settings=settings,
    )
