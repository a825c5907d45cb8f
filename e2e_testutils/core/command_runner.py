"""Run external commands (kubectl, kind, the scaffolding CLI).

``CommandRunner`` is the only capability the rest of the package needs:
run a command, get its output, fail on non-zero exit. ``CmdContext`` is
the subprocess-backed implementation; tests substitute their own.
"""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from e2e_testutils.core.errors import CommandError
from e2e_testutils.helpers.helpers_logging import print_command


class CommandRunner(Protocol):
    """Anything that can run a command and return its combined output."""

    def run(self, cmd: list[str], timeout: float | None = None) -> str:
        ...


@dataclass
class CmdContext:
    """Working directory and extra environment for external commands.

    Attributes:
        dir: Directory commands run in (current directory when None).
        env: Extra ``KEY=VALUE`` entries appended to ``os.environ``.
        stdin: Text passed on standard input, if any.
    """
    dir: Path | None = None
    env: list[str] = field(default_factory=list)
    stdin: str | None = None

    def environ(self) -> dict[str, str]:
        merged = os.environ.copy()
        for entry in self.env:
            key, sep, value = entry.partition("=")
            if not sep:
                raise ValueError(f"environment entry must be KEY=VALUE: {entry!r}")
            merged[key] = value
        return merged

    def run(self, cmd: list[str], timeout: float | None = None) -> str:
        """Run ``cmd`` and return stdout and stderr combined.

        Raises:
            CommandError: If the command exits with a non-zero status.
            FileNotFoundError: If the executable does not exist.
            subprocess.TimeoutExpired: If ``timeout`` elapses.
        """
        cwd = str(self.dir) if self.dir is not None else None
        print_command(cmd, cwd)

        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=self.environ(),
            input=self.stdin,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
            check=False,
        )
        if result.returncode != 0:
            raise CommandError(cmd, result.returncode, result.stdout)
        return result.stdout


@dataclass(frozen=True)
class KubernetesVersion:
    client: str
    server: str

    @classmethod
    def from_json(cls, raw: str) -> KubernetesVersion:
        """Parse ``kubectl version -o json`` output."""
        data: dict[str, Any] = json.loads(raw)
        return cls(
            client=data.get("clientVersion", {}).get("gitVersion", ""),
            server=data.get("serverVersion", {}).get("gitVersion", ""),
        )


@dataclass
class Kubectl:
    """kubectl bound to a runner and a default namespace."""
    runner: CommandRunner
    namespace: str = "default"

    def command(self, *args: str) -> str:
        return self.runner.run(["kubectl", *args])

    def command_in_namespace(self, *args: str) -> str:
        return self.command("-n", self.namespace, *args)

    def _verb(self, verb: str, in_namespace: bool, args: tuple[str, ...]) -> str:
        if in_namespace:
            return self.command_in_namespace(verb, *args)
        return self.command(verb, *args)

    def apply(self, in_namespace: bool, *args: str) -> str:
        return self._verb("apply", in_namespace, args)

    def get(self, in_namespace: bool, *args: str) -> str:
        return self._verb("get", in_namespace, args)

    def delete(self, in_namespace: bool, *args: str) -> str:
        return self._verb("delete", in_namespace, args)

    def wait(self, in_namespace: bool, *args: str) -> str:
        return self._verb("wait", in_namespace, args)

    def logs(self, *args: str) -> str:
        return self.command_in_namespace("logs", *args)

    def version(self) -> KubernetesVersion:
        """Return client and server versions; fails without a reachable cluster."""
        return KubernetesVersion.from_json(self.command("version", "-o", "json"))
