#!/usr/bin/env python3
"""Operator e2e test utilities - Main Entry Point.

Usage:
    e2e-testutils <command> [options]

Commands:
    replace        Replace every occurrence of a string in a file
    replace-regex  Replace every match of a regular expression in a file
    uncomment      Strip a comment prefix from a block of lines in a file
    prepend        Insert a line at the beginning of a file
    multigroup     Mark a scaffolded project as multi-group (PROJECT file)
    load-image     Load a local docker image into the kind cluster
    test           Run project tests (unit and CLI e2e)
    help           Show this help message
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from e2e_testutils.core.errors import CommandError, PatchError
from e2e_testutils.core.test_context import BINARY_NAME, TestContext
from e2e_testutils.core.text_patcher import (
    prepend_to_file,
    replace_in_file,
    replace_regex_in_file,
    uncomment_code,
)
from e2e_testutils.helpers.helpers_logging import print_error, print_success

_PASSTHROUGH_CTX: dict[str, object] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}

# Errors a command reports and turns into exit code 1.
_HANDLED_ERRORS = (PatchError, CommandError, OSError, ValueError)


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)


def _report(action: str, exc: Exception) -> int:
    print_error(f"{action}: {exc}")
    return 1


def _read_block(value: str, from_file: bool) -> str:
    if from_file:
        with open(value, encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()
    return value


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level e2e-testutils command group."""
    if ctx.invoked_subcommand is None:
        print_help()
    return 0


@_click_cli.command(name="replace", help="Replace every occurrence of OLD with NEW")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("old")
@click.argument("new")
def replace_cmd(file: Path, old: str, new: str) -> int:
    try:
        replace_in_file(file, old, new)
    except _HANDLED_ERRORS as e:
        return _report(f"replace in {file}", e)
    print_success(f"Replaced content in {file}")
    return 0


@_click_cli.command(
    name="replace-regex",
    help="Replace every match of PATTERN with REPLACEMENT (\\1 back-references)",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("pattern")
@click.argument("replacement")
def replace_regex_cmd(file: Path, pattern: str, replacement: str) -> int:
    try:
        replace_regex_in_file(file, pattern, replacement)
    except _HANDLED_ERRORS as e:
        return _report(f"regex replace in {file}", e)
    print_success(f"Replaced matches of {pattern!r} in {file}")
    return 0


@_click_cli.command(name="uncomment", help="Strip PREFIX from each line of TARGET")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("target")
@click.option("--prefix", required=True,
              help="Comment marker to strip from each line, e.g. '# ' or '// '")
@click.option("--from-file", is_flag=True,
              help="Read the TARGET block from the file named by TARGET")
def uncomment_cmd(file: Path, target: str, prefix: str, from_file: bool) -> int:
    try:
        uncomment_code(file, _read_block(target, from_file), prefix)
    except _HANDLED_ERRORS as e:
        return _report(f"uncomment in {file}", e)
    print_success(f"Uncommented code in {file}")
    return 0


@_click_cli.command(name="prepend", help="Insert LINE at the beginning of FILE")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("line")
@click.option("--no-newline", is_flag=True,
              help="Do not terminate LINE with a newline")
def prepend_cmd(file: Path, line: str, no_newline: bool) -> int:
    if not no_newline and not line.endswith("\n"):
        line += "\n"
    try:
        prepend_to_file(file, line)
    except _HANDLED_ERRORS as e:
        return _report(f"prepend to {file}", e)
    print_success(f"Prepended line to {file}")
    return 0


@_click_cli.command(name="multigroup", help="Prepend 'multigroup: true' to PROJECT")
@click.option("--dir", "project_dir", default=".", show_default=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Scaffolded project directory")
def multigroup_cmd(project_dir: Path) -> int:
    try:
        tc = TestContext.new_partial(BINARY_NAME, project_dir)
        tc.allow_project_be_multi_group()
    except _HANDLED_ERRORS as e:
        return _report(f"multigroup in {project_dir}", e)
    print_success(f"Project {tc.project_name} is now multi-group")
    return 0


@_click_cli.command(name="load-image", help="Load IMAGE into the kind cluster")
@click.argument("image")
@click.option("--dir", "project_dir", default=".", show_default=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Directory to run kind from")
def load_image_cmd(image: str, project_dir: Path) -> int:
    try:
        tc = TestContext.new_partial(BINARY_NAME, project_dir)
        tc.load_image_to_kind_cluster_with_name(image)
    except _HANDLED_ERRORS as e:
        return _report(f"load image {image}", e)
    print_success(f"Loaded {image} into kind cluster {tc.settings.kind_cluster}")
    return 0


@_click_cli.command(
    name="test",
    help="Run tests (--cli for e2e, --all for everything)",
    context_settings=_PASSTHROUGH_CTX,
    add_help_option=False,
)
@click.pass_context
def test_cmd(ctx: click.Context) -> int:
    from e2e_testutils.cli.test_runner import run_tests

    return run_tests(list(ctx.args))


@_click_cli.command(name="help", help="Show help message")
def help_cmd() -> int:
    print_help()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ["--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=args,
            prog_name="e2e-testutils",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
