"""Error types raised by the patch operations and command runner."""

from __future__ import annotations


class PatchError(Exception):
    """Base class for failures of a file patch operation."""


class TargetNotFoundError(PatchError, LookupError):
    """The content, pattern or block to patch is not present in the file.

    The file is left exactly as it was before the call.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class PatternSyntaxError(PatchError, ValueError):
    """A regular expression could not be compiled.

    Raised before the target file is touched.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class CommandError(Exception):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, output: str) -> None:
        super().__init__(
            f"{' '.join(cmd)} failed with error: (exit status {returncode}) {output}"
        )
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
