# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for localworker."""

from __future__ import annotations

import rich_click as click

from localworker.__about__ import __version__
from localworker.cli.commands import state
from localworker.logging import init_cli_logging, logger


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]}, invoke_without_command=True
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="localworker")
def localworker(*, verbose: bool) -> None:
    """localworker - Inspect and change local worker factory settings."""
    init_cli_logging(verbose=verbose)

    ctx = click.get_current_context()
    if ctx is None or ctx.invoked_subcommand is None:
        logger.info("localworker - Inspect and change local worker factory settings")
        logger.info("Run 'localworker --help' for available commands.")


# Register subcommands
localworker.add_command(state.state)
