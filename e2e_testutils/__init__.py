"""
Operator e2e test utilities

Helpers for end-to-end tests of an operator-scaffolding CLI: text patches
for generated project files and a per-run context that provisions
cluster prerequisites through kubectl, kind and the CLI itself.
"""

__version__ = "0.1.0"

from e2e_testutils.core.errors import (
    CommandError,
    PatchError,
    PatternSyntaxError,
    TargetNotFoundError,
)
from e2e_testutils.core.test_context import TestContext
from e2e_testutils.core.text_patcher import (
    prepend_to_file,
    replace_in_file,
    replace_regex_in_file,
    uncomment_code,
)

__all__ = [
    "CommandError",
    "PatchError",
    "PatternSyntaxError",
    "TargetNotFoundError",
    "TestContext",
    "prepend_to_file",
    "replace_in_file",
    "replace_regex_in_file",
    "uncomment_code",
]
