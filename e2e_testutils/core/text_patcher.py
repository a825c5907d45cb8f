"""Targeted text mutations on scaffolded project files.

Every operation reads the whole file, computes the new content in memory
and only then writes it back. When the target cannot be located the file
is not written at all and ``TargetNotFoundError`` is raised, so a silent
no-op in generated scaffolding is caught by the caller.

Operations:
    replace_in_file        Replace every occurrence of a literal string
    replace_regex_in_file  Replace every match of a regular expression
    uncomment_code         Strip a comment prefix from a verbatim block
    prepend_to_file        Insert a line at the very beginning of a file

File modes: the two replace operations and prepend keep the file's
existing permission bits, uncomment always leaves the file at 0644.
"""

from __future__ import annotations

import os
import re
import stat
from pathlib import Path

from e2e_testutils.core.errors import PatternSyntaxError, TargetNotFoundError

# Mode applied by uncomment_code regardless of the file's previous mode.
UNCOMMENT_FILE_MODE = 0o644

_ENCODING = "utf-8"
# Bytes that are not valid UTF-8 round-trip unchanged.
_ERRORS = "surrogateescape"

PathLike = str | os.PathLike[str]


def _read(path: Path) -> str:
    # newline="" keeps CRLF line endings byte-for-byte.
    with path.open(encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        return f.read()


def _write(path: Path, content: str, mode: int) -> None:
    with path.open("w", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        f.write(content)
    os.chmod(path, mode)


def replace_in_file(path: PathLike, old: str, new: str) -> None:
    """Replace all instances of ``old`` with ``new`` in the file at ``path``.

    Args:
        path: File to patch.
        old: Exact substring to replace.
        new: Replacement text.

    Raises:
        TargetNotFoundError: If ``old`` does not occur in the file.
        OSError: If the file cannot be stat'ed, read or written.
    """
    file_path = Path(path)
    mode = stat.S_IMODE(file_path.stat().st_mode)
    content = _read(file_path)

    if old not in content:
        raise TargetNotFoundError(
            "unable to find the content to be replaced", str(file_path)
        )

    _write(file_path, content.replace(old, new), mode)


def replace_regex_in_file(path: PathLike, match: str, replace: str) -> None:
    """Replace every match of the pattern ``match`` with ``replace``.

    ``replace`` is an ``re.sub`` template, so ``\\1`` and ``\\g<name>``
    back-references are expanded.

    A substitution that leaves the content unchanged is reported as
    "not found", including the case where the pattern matched but the
    replacement text equals the matched text.

    Raises:
        PatternSyntaxError: If the pattern (or the replacement template)
            is malformed. The pattern is compiled before any file I/O.
        TargetNotFoundError: If the content is unchanged after substitution.
        OSError: If the file cannot be stat'ed, read or written.
    """
    try:
        matcher = re.compile(match)
    except re.error as e:
        raise PatternSyntaxError(match, str(e)) from e

    file_path = Path(path)
    mode = stat.S_IMODE(file_path.stat().st_mode)
    content = _read(file_path)

    try:
        replaced = matcher.sub(replace, content)
    except re.error as e:
        raise PatternSyntaxError(replace, str(e)) from e

    if replaced == content:
        raise TargetNotFoundError(
            "unable to find the content to be replaced", str(file_path)
        )

    _write(file_path, replaced, mode)


def uncomment_code(path: PathLike, target: str, prefix: str) -> None:
    """Remove the comment ``prefix`` from each line of ``target`` in the file.

    ``target`` is located as an exact, contiguous substring (first
    occurrence). Within the matched block only a leading ``prefix`` is
    stripped from each line; text before and after the block is untouched.
    Line endings inside the block are kept as they are, so a block ending
    in a newline still ends in exactly one newline.

    Args:
        path: File to patch.
        target: Commented block exactly as it appears in the file.
        prefix: Comment marker to strip, e.g. ``"# "`` or ``"// "``.

    Raises:
        TargetNotFoundError: If ``target`` is not in the file.
        OSError: If the file cannot be read or written.
    """
    file_path = Path(path)
    content = _read(file_path)

    idx = content.find(target)
    if idx < 0:
        raise TargetNotFoundError(
            f"unable to find the code {target} to be uncomment", str(file_path)
        )

    if not target:
        return

    uncommented = "\n".join(
        line.removeprefix(prefix) for line in target.split("\n")
    )
    out = content[:idx] + uncommented + content[idx + len(target):]

    _write(file_path, out, UNCOMMENT_FILE_MODE)


def prepend_to_file(path: PathLike, line: str) -> None:
    """Write ``line`` followed by the file's original content.

    There is no search step, so this never raises ``TargetNotFoundError``.
    It is not idempotent: calling it twice prepends ``line`` twice.

    Raises:
        OSError: If the file cannot be stat'ed, read or written.
    """
    file_path = Path(path)
    mode = stat.S_IMODE(file_path.stat().st_mode)
    content = _read(file_path)

    _write(file_path, line + content, mode)
