# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""CLI discovery and argument parsing utilities."""

from __future__ import annotations

import shlex
import shutil


def check_cli_availability(cli_name: str, error_msg: str | None = None) -> str | None:
    """Check if a CLI tool is available in PATH.

    Args:
        cli_name (str): Name of the CLI tool to check
        error_msg (str | None): Optional error message to raise if CLI not found

    Returns:
        str | None: Path to the CLI executable if found, None otherwise

    Raises:
        FileNotFoundError: If error_msg is provided and CLI is not found
    """
    path = shutil.which(cli_name)
    if not path and error_msg:
        raise FileNotFoundError(error_msg)
    return path


def split_args(value: str) -> tuple[str, ...]:
    """Split a shell-style argument string into a tuple of arguments."""
    return tuple(shlex.split(value))
