"""Text patching, command execution and the per-run test context."""

from e2e_testutils.core.command_runner import CmdContext, CommandRunner, Kubectl
from e2e_testutils.core.text_patcher import (
    prepend_to_file,
    replace_in_file,
    replace_regex_in_file,
    uncomment_code,
)

__all__ = [
    "CmdContext",
    "CommandRunner",
    "Kubectl",
    "prepend_to_file",
    "replace_in_file",
    "replace_regex_in_file",
    "uncomment_code",
]
